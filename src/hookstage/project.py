"""
Project-scoped copy: resolve caller-relative sources and project-relative
targets, refuse anything that would land outside the git root.
"""

import os
from pathlib import Path

from hookstage.copier import copy_path
from hookstage.errors import DestinationOutsideRootError
from hookstage.paths import absolute, find_git_root
from hookstage.types import CopyOptions, CopyResult


def copy_into_project(
    source: str | os.PathLike,
    target: str | os.PathLike | CopyOptions | None = None,
    options: CopyOptions | None = None,
    *,
    caller_dir: str | os.PathLike,
) -> list[CopyResult]:
    """
    Copy `source` (relative to `caller_dir`) to `target` (relative to the
    repository enclosing `caller_dir`).

    `target` may be omitted (or empty), in which case the source's relative path is
    mirrored under the project root. Options may be passed in its place:
    `copy_into_project("assets", CopyOptions(overwrite=True), caller_dir=...)`.

    Raises DestinationOutsideRootError before touching the filesystem if the
    target escapes the project root.
    """
    if isinstance(target, CopyOptions):
        options, target = target, None
    options = options or CopyOptions()

    root = absolute(caller_dir)
    project_root = find_git_root(root)

    source_path = absolute(source, root)
    target_path = absolute(target or source, project_root)

    if not target_path.is_relative_to(project_root):
        raise DestinationOutsideRootError(target_path, project_root)

    return copy_path(source_path, target_path, options)
