"""Slash command - Scaffold and refresh tool slash command files."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from openspec.application.slash_command_registry import SlashCommandRegistry
from openspec.application.slash_command_service import SlashCommandService
from openspec.core.domain.errors import OpenSpecError
from openspec.core.domain.slash_commands import SlashCommandId

app = typer.Typer(help="Scaffold and refresh slash command files")
console = Console()


def _parse_tools(tools: Optional[str]) -> Optional[list[str]]:
    if not tools:
        return None
    return [tool.strip() for tool in tools.split(",") if tool.strip()]


def _print_results(results: dict[str, list[str]], title: str) -> None:
    table = Table(title=title)
    table.add_column("Tool", style="cyan")
    table.add_column("File")

    for tool_id, paths in results.items():
        for path in paths:
            table.add_row(tool_id, path)

    console.print(table)


@app.command("init")
def init_commands(
    path: Path = typer.Argument(Path("."), help="Project root"),
    tools: Optional[str] = typer.Option(
        None, "--tools", "-t", help="Comma-separated tool ids (e.g. gemini,qwen)"
    ),
) -> None:
    """Write slash command files, overwriting existing ones."""
    service = SlashCommandService()
    try:
        results = asyncio.run(service.generate(path, _parse_tools(tools)))
    except OpenSpecError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    _print_results(results, "Slash Commands Written")


@app.command("update")
def update_commands(
    path: Path = typer.Argument(Path("."), help="Project root"),
    tools: Optional[str] = typer.Option(
        None, "--tools", "-t", help="Comma-separated tool ids (default: all)"
    ),
) -> None:
    """Refresh slash command files that already exist."""
    service = SlashCommandService()
    try:
        results = asyncio.run(service.update(path, _parse_tools(tools)))
    except OpenSpecError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    if not any(results.values()):
        console.print("[yellow]No managed slash command files found.[/yellow]")
        console.print("\nRun 'openspec slash init' to create them.")
        return

    _print_results(results, "Slash Commands Updated")


@app.command("tools")
def list_tools() -> None:
    """List supported tools and the files they own."""
    registry = SlashCommandRegistry()

    table = Table(title="Supported Tools")
    table.add_column("Tool", style="cyan")
    table.add_column("Command", style="yellow")
    table.add_column("Path", style="dim")

    for configurator in registry.get_all():
        for target in configurator.get_targets():
            table.add_row(configurator.tool_id, target.id.value, target.path)

    console.print(table)


@app.command("show")
def show_command(
    tool: str = typer.Argument(..., help="Tool id (e.g. gemini)"),
    command: str = typer.Argument(..., help="Command id: proposal, apply or archive"),
) -> None:
    """Print the rendered file for a tool command without writing it."""
    registry = SlashCommandRegistry()
    try:
        configurator = registry.get(tool)
    except OpenSpecError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    try:
        command_id = SlashCommandId(command.lower())
    except ValueError:
        valid = ", ".join(c.value for c in SlashCommandId)
        console.print(f"[red]Unknown command: {escape(command)} (expected one of: {valid})[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Path:[/bold] {configurator.get_relative_path(command_id)}\n")
    console.print(
        configurator.render_content(command_id),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
