"""
Install command - copies the bundled hook into .git/hooks/ and reports
what was replaced.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hookstage.installer import hook_status, install_hooks
from hookstage.types import HookName

console = Console()


def run_install(hooks: list[HookName], root: Path) -> None:
    """Main install routine."""
    console.print("\n[bold]Installing git hooks...[/bold]\n")

    results = install_hooks(hooks, root)

    for result in results:
        console.print(f"[green]✓[/green] Installed: {result.name.value}")
        if result.backup_path is not None:
            console.print(
                f"    [dim]Previous hook kept as {escape(result.backup_path.name)}[/dim]", soft_wrap=True
            )

    if results:
        console.print(
            f"\n[dim]Hooks directory: {escape(str(results[0].path.parent))}[/dim]", soft_wrap=True
        )
    console.print("\n[green]Installation complete![/green]\n")


def show_status(root: Path) -> None:
    """Show status of every hook in the repository."""
    table = Table(title="Git Hooks Status")
    table.add_column("Hook", style="cyan")
    table.add_column("Installed", style="dim")
    table.add_column("Managed", style="bold")
    table.add_column("Backup", style="dim")

    for state in hook_status(root):
        if not state.installed and not state.has_backup:
            continue

        installed_str = "[green]Yes[/green]" if state.installed else "[red]No[/red]"
        managed_str = "[green]Yes[/green]" if state.managed else "[dim]No[/dim]"
        backup_str = "Yes" if state.has_backup else "-"

        table.add_row(state.name.value, installed_str, managed_str, backup_str)

    if not table.row_count:
        console.print("[dim]No hooks installed.[/dim]")
        console.print("Use [bold]hookstage install[/bold] to add the pre-commit hook.")
        return

    console.print()
    console.print(table)
    console.print()
