"""
Main CLI entry point for hookstage.

Usage:
    hookstage install [HOOK...] [--root PATH]
    hookstage copy SOURCE [TARGET] [--overwrite] [--from PATH]
    hookstage root [START]
    hookstage status [--root PATH]
    hookstage run HOOK [--root PATH]
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from hookstage.bootstrap import exit_on_fatal
from hookstage.errors import HookConfigError
from hookstage.paths import find_git_root
from hookstage.types import HookName

app = typer.Typer(
    name="hookstage",
    help="Install git hooks and stage files into a project",
    no_args_is_help=True,
)
console = Console()


@app.command()
def install(
    hooks: list[HookName] | None = typer.Argument(None, help="Hooks to install (default: pre-commit)"),
    root: Path | None = typer.Option(None, "--root", "-r", help="Any directory inside the repository"),
) -> None:
    """Install the bundled hook script into .git/hooks/ (existing hooks are backed up)."""
    from hookstage.commands.install import run_install

    with exit_on_fatal():
        run_install(hooks or [HookName.PRE_COMMIT], root or Path.cwd())


@app.command()
def copy(
    source: Path = typer.Argument(..., help="File or directory, relative to --from"),
    target: str | None = typer.Argument(None, help="Destination relative to the project root"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace files that already exist"),
    caller_dir: Path | None = typer.Option(None, "--from", help="Directory SOURCE is relative to"),
) -> None:
    """Copy a file or directory into the project (never outside the git root)."""
    from hookstage.commands.copy import run_copy

    with exit_on_fatal():
        run_copy(source, target, overwrite, caller_dir or Path.cwd())


@app.command()
def root(
    start: Path | None = typer.Argument(None, help="Directory to start searching from"),
) -> None:
    """Print the root of the enclosing git repository."""
    with exit_on_fatal():
        console.print(str(find_git_root(start or Path.cwd())), soft_wrap=True)


@app.command()
def status(
    root: Path | None = typer.Option(None, "--root", "-r", help="Any directory inside the repository"),
) -> None:
    """Show status of installed hooks."""
    from hookstage.commands.install import show_status

    with exit_on_fatal():
        show_status(root or Path.cwd())


@app.command()
def run(
    hook: HookName = typer.Argument(..., help="Hook whose commands should run"),
    root: Path | None = typer.Option(None, "--root", "-r", help="Any directory inside the repository"),
) -> None:
    """Run the commands configured for HOOK in pyproject.toml."""
    from hookstage.runner import run_hook

    with exit_on_fatal():
        project_root = find_git_root(root or Path.cwd())

    try:
        code = run_hook(project_root, hook)
    except HookConfigError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1)

    if code != 0:
        console.print(f"[red]✗[/red] {hook.value} failed (exit status {code})")
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
