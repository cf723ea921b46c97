"""
Path constants and utilities for hookstage.

Everything here works on absolute paths; callers pass relative ones at their
own risk of being resolved against the current working directory.
"""

import os
import stat
import sys
from pathlib import Path

from hookstage.errors import GitRootNotFoundError

GIT_DIR_NAME = ".git"
GIT_HOOKS_DIR_NAME = "hooks"
BACKUP_SUFFIX = ".backup"

# Modes before the umask is applied (hook scripts are chmod'ed, so unmasked)
FILE_MODE = 0o666
DIR_MODE = 0o777
HOOK_MODE = 0o777


def absolute(path: str | os.PathLike, base: str | os.PathLike | None = None) -> Path:
    """Make `path` absolute against `base` (default: cwd) and collapse `..`."""
    if base is not None:
        path = os.path.join(base, path)
    return Path(os.path.abspath(path))


def is_dir(path: str | os.PathLike) -> bool:
    """True if `path` is a directory. Stat failures count as "no"."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def find_git_root(start: str | os.PathLike) -> Path:
    """
    Find the nearest directory at or above `start` that contains a .git directory.

    Raises GitRootNotFoundError once the filesystem root is reached.
    """
    current = absolute(start)
    for candidate in (current, *current.parents):
        if is_dir(candidate / GIT_DIR_NAME):
            return candidate
    raise GitRootNotFoundError("Unable to find a .git directory for this project")


def git_hooks_dir(git_root: Path) -> Path:
    return git_root / GIT_DIR_NAME / GIT_HOOKS_DIR_NAME


def entry_point_dir() -> Path:
    """
    Directory of the running program's top-level module.

    Interactive sessions and `python -c` have no __main__ file; the current
    working directory stands in for them.
    """
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if not main_file:
        return Path.cwd()
    return absolute(main_file).parent
