"""OpenSpec CLI entry point."""

import typer
from rich.console import Console

from openspec.api.cli.commands import slash
from openspec.api.cli.logging_setup import configure_logging

app = typer.Typer(
    name="openspec",
    help="OpenSpec - slash command scaffolding for AI coding assistants",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(slash.app, name="slash", help="Slash command files")


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """OpenSpec CLI."""
    configure_logging(debug)
    ctx.obj = {"debug": debug}


@app.command()
def version():
    """Show OpenSpec version."""
    from openspec import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
