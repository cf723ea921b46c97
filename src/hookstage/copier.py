"""
Recursive file/directory copy.

Conflict handling:
- Target file missing: copy
- Target file exists, overwrite requested: replace its content
- Target file exists, no overwrite: leave it alone, report a CONFLICT result
Directories that already exist are reused silently.
"""

import os
from pathlib import Path

from hookstage.errors import CopyConflictError, SourceUnreadableError
from hookstage.paths import DIR_MODE, FILE_MODE, is_dir
from hookstage.types import CopyOptions, CopyResult, CopyStatus


def make_dirs(path: Path) -> None:
    """Create `path` and any missing parents, like mkdir -p."""
    if is_dir(path):
        return
    path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)


def copy_file(source: Path, target: Path, options: CopyOptions) -> CopyResult:
    """Copy a single file. Unreadable sources are fatal."""
    make_dirs(target.parent)

    if target.exists() and not options.overwrite:
        return CopyResult(
            source=source,
            target=target,
            status=CopyStatus.CONFLICT,
            error=CopyConflictError(target),
        )

    try:
        content = source.read_bytes()
    except OSError as exc:
        raise SourceUnreadableError(source) from exc

    # os.open applies the umask to FILE_MODE for newly created files
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as fh:
        fh.write(content)
    return CopyResult(source=source, target=target, status=CopyStatus.COPIED)


def copy_directory(source: Path, target: Path, options: CopyOptions) -> list[CopyResult]:
    make_dirs(target)

    results = []
    # Listing order is whatever the filesystem yields
    for entry in source.iterdir():
        results.extend(copy_path(entry, target / entry.name, options))
    return results


def copy_path(source: Path, target: Path, options: CopyOptions | None = None) -> list[CopyResult]:
    """
    Copy `source` to `target`, recursing into directories.

    Returns one result per file visited. Conflicts are reported in the
    results, not raised.
    """
    options = options or CopyOptions()
    if is_dir(source):
        return copy_directory(source, target, options)
    return [copy_file(source, target, options)]
