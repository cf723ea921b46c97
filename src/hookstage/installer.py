"""
Hook installer - copies the bundled hook script into <repo>/.git/hooks/.

Conflict handling:
- If a hook of that name exists: rename it to <name>.backup (replacing any
  older backup), then install
- If hook missing: install normally
Nothing is rolled back if a later hook in the same call fails.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from hookstage.copier import make_dirs
from hookstage.paths import BACKUP_SUFFIX, HOOK_MODE, find_git_root, git_hooks_dir, is_dir
from hookstage.types import HookInstallResult, HookName, HookState, normalize_hooks

TEMPLATE_NAME = "pre-commit"


def get_bundled_hooks_dir() -> Path:
    """Get path to bundled hooks in the package."""
    import hookstage.hooks as hooks_module

    return Path(hooks_module.__file__).parent


def get_template_path() -> Path:
    return get_bundled_hooks_dir() / TEMPLATE_NAME


def files_identical(path1: Path, path2: Path) -> bool:
    """Check if two files have identical content."""
    return path1.read_bytes() == path2.read_bytes()


def install_hook(hooks_dir: Path, hook: HookName, template: bytes) -> HookInstallResult:
    dest = hooks_dir / hook.value
    backup_path = None

    if dest.exists():
        backup_path = dest.with_name(dest.name + BACKUP_SUFFIX)
        os.replace(dest, backup_path)

    dest.write_bytes(template)
    # Hooks must be runnable whatever the umask says
    dest.chmod(HOOK_MODE)
    return HookInstallResult(name=hook, path=dest, backup_path=backup_path)


def install_hooks(
    hooks: HookName | str | Iterable[HookName | str],
    root: str | os.PathLike,
) -> list[HookInstallResult]:
    """
    Install the bundled hook script under each of `hooks`.

    `root` is any directory inside the target repository.
    """
    hooks = normalize_hooks(hooks)
    hooks_dir = git_hooks_dir(find_git_root(root))

    if not is_dir(hooks_dir):
        make_dirs(hooks_dir)

    template = get_template_path().read_bytes()
    return [install_hook(hooks_dir, hook, template) for hook in hooks]


def hook_status(root: str | os.PathLike) -> list[HookState]:
    """Report every known hook in the repository enclosing `root`."""
    hooks_dir = git_hooks_dir(find_git_root(root))
    template = get_template_path()
    states = []

    for hook in HookName:
        dest = hooks_dir / hook.value
        installed = dest.is_file()
        states.append(
            HookState(
                name=hook,
                installed=installed,
                managed=installed and files_identical(template, dest),
                has_backup=dest.with_name(dest.name + BACKUP_SUFFIX).exists(),
            )
        )

    return states
