"""Display command for Docker Home."""

import click
from rich.console import Console
from rich.table import Table

from ...services.exceptions import DockerServiceError
from ..helpers import connect_or_exit, run_async


@click.command()
@click.option('--selected', '-s', is_flag=True, help='Only show entries visible on the overview page')
@click.pass_context
def display(ctx, selected):
    """Show the curated overview merged with live state"""
    console = Console()
    dashboard = connect_or_exit(ctx)

    try:
        records = run_async(dashboard, dashboard.get_display())
    except DockerServiceError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)

    if selected:
        records = [record for record in records if record.selected]

    if not records:
        console.print("[yellow]No curated containers.[/yellow]")
        console.print("Save a selection from the edit view to create one.")
        return

    table = Table(title="Overview")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Group", style="green")
    table.add_column("Status")
    table.add_column("Shown")
    table.add_column("URLs", style="white")

    for record in records:
        table.add_row(
            record.display_name or record.id[:12],
            record.group_label or "-",
            "[green]running[/green]" if record.running else "[yellow]stopped[/yellow]",
            "yes" if record.selected else "no",
            "\n".join(record.urls or []) or "-",
        )

    console.print(table)
