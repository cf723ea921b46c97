"""
Copy command - stage files or directories into the project, refusing to
leave the git root.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from hookstage.errors import DestinationOutsideRootError
from hookstage.project import copy_into_project
from hookstage.types import CopyOptions, CopyStatus

console = Console()


def run_copy(source: Path, target: str | None, overwrite: bool, caller_dir: Path) -> None:
    try:
        results = copy_into_project(
            source, target, CopyOptions(overwrite=overwrite), caller_dir=caller_dir
        )
    except DestinationOutsideRootError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}: {escape(str(exc.target))}", soft_wrap=True)
        raise typer.Exit(2)

    copied = [r for r in results if r.status == CopyStatus.COPIED]
    conflicts = [r for r in results if r.status == CopyStatus.CONFLICT]

    if copied:
        console.print(f"[green]✓[/green] Copied {len(copied)} file(s)")
    if not results:
        console.print("[dim]○[/dim] Nothing to copy")
    if conflicts:
        console.print(f"\n[yellow]![/yellow] Conflicts detected ({len(conflicts)}):")
        for c in conflicts:
            console.print(f"    {escape(str(c.error))}", soft_wrap=True)
        console.print("      → To replace: [dim]hookstage copy --overwrite ...[/dim]")
        raise typer.Exit(1)
