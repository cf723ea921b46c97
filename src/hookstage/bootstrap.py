"""
Entry-point helpers for build and install scripts.

Library functions take explicit paths and raise; the wrappers here supply the
running program's own location and turn fatal errors into a process exit:

    # in a package's install step
    from hookstage import bootstrap
    bootstrap.install("pre-commit")
"""

import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape

from hookstage.errors import FatalError, GitRootNotFoundError
from hookstage.installer import install_hooks
from hookstage.paths import entry_point_dir
from hookstage.project import copy_into_project
from hookstage.types import CopyOptions, CopyResult, HookInstallResult, HookName

console = Console()
err_console = Console(stderr=True)


def report_fatal(exc: FatalError) -> None:
    if isinstance(exc, GitRootNotFoundError):
        err_console.print(
            f"[yellow]WARNING:[/yellow] {escape(str(exc))}, installation aborted.", soft_wrap=True
        )
    else:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        if exc.__cause__ is not None:
            console.print(f"  {escape(str(exc.__cause__))}", soft_wrap=True)


@contextmanager
def exit_on_fatal() -> Iterator[None]:
    """Report a FatalError and exit with its exit code."""
    try:
        yield
    except FatalError as exc:
        report_fatal(exc)
        raise SystemExit(exc.exit_code) from exc


def install(
    hooks: HookName | str | Iterable[HookName | str] = HookName.PRE_COMMIT,
) -> list[HookInstallResult]:
    """Install hooks into the repository enclosing the running program."""
    with exit_on_fatal():
        return install_hooks(hooks, entry_point_dir())


def copy(
    source: str | os.PathLike,
    target: str | os.PathLike | CopyOptions | None = None,
    options: CopyOptions | None = None,
) -> list[CopyResult]:
    """Copy relative to the running program into its enclosing repository."""
    with exit_on_fatal():
        return copy_into_project(source, target, options, caller_dir=entry_point_dir())
