"""Command: railcat permissions - Inspect and build permission bitmasks."""

import typer
from rich.console import Console
from rich.table import Table

from railcat.core.errors import InvalidInputError, UnknownPermissionError
from railcat.core.permissions import get_permission_codec


console = Console()

app = typer.Typer(
    help="Inspect the permission registry and convert bitmasks.",
    no_args_is_help=True,
)


@app.command(name="list")
def list_permissions() -> None:
    """List registered permissions in bit order."""
    codec = get_permission_codec()

    table = Table(title="Permissions", show_header=True)
    table.add_column("Bit", style="green", no_wrap=True)
    table.add_column("Value", style="green", no_wrap=True)
    table.add_column("Name", style="cyan", no_wrap=True)

    for position, permission in enumerate(codec.registry.permissions):
        table.add_row(str(position), str(permission.bit_value), permission.name)

    console.print()
    console.print(table)
    console.print()


# Negative values are arguments for the codec to reject, not options
@app.command(context_settings={"ignore_unknown_options": True})
def decode(
    value: int = typer.Argument(..., help="Encoded permission set"),
) -> None:
    """Show the permission names granted by a bitmask."""
    codec = get_permission_codec()
    try:
        names = codec.decode(value)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from e

    if not names:
        console.print("[yellow]No permissions granted.[/yellow]")
        return

    for name in names:
        console.print(f"  [cyan]{name}[/cyan]")


@app.command()
def encode(
    names: list[str] = typer.Argument(None, help="Permission names to combine"),
) -> None:
    """Combine permission names into a bitmask for a token claim."""
    codec = get_permission_codec()
    try:
        value = codec.encode(name.upper() for name in names or [])
    except UnknownPermissionError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        console.print(f"Known permissions: {', '.join(codec.registry.names)}")
        raise typer.Exit(1) from e

    console.print(str(value))
