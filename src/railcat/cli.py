"""Main railcat CLI application."""

import typer
from rich.console import Console

from railcat import __version__
from railcat.commands import permissions


console = Console()

app = typer.Typer(
    name="railcat",
    help="Administer the railway heritage catalog.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(permissions.app, name="permissions")


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """railcat CLI - Administer the railway heritage catalog."""
    if version:
        console.print(f"[bold cyan]railcat[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
