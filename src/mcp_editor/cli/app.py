"""CLI entry point for MCP Editor."""

import asyncio
import logging
from typing import Any

import typer
from rich.markup import escape
from rich.table import Table

from mcp_editor import __version__
from mcp_editor.cli.constants import ExitCodes
from mcp_editor.cli.session import setup_session_logging
from mcp_editor.cli.utils import get_console
from mcp_editor.config import (
    ConfigurationError,
    EditorSettings,
    get_config_path,
    load_settings,
    save_config,
)
from mcp_editor.server.dispatcher import EditorDispatcher

app = typer.Typer(help="MCP Editor - line-oriented text file editing tools")

console = get_console()
err_console = get_console(stderr=True)

logger = logging.getLogger(__name__)


def _load_settings_or_exit() -> EditorSettings:
    """Load effective settings, exiting with an error message on failure."""
    try:
        return load_settings()
    except ConfigurationError as e:
        err_console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCodes.GENERAL_ERROR)


def _run_tool(name: str, arguments: dict[str, Any]) -> None:
    """Run one tool through the dispatcher and print its response."""
    settings = _load_settings_or_exit()
    dispatcher = EditorDispatcher(config=settings)
    response = asyncio.run(dispatcher.dispatch(name, arguments))

    if not response["success"]:
        err_console.print(f"[red]Error:[/red] {escape(response['message'])}", soft_wrap=True)
        raise typer.Exit(ExitCodes.GENERAL_ERROR)

    console.print(response["result"], markup=False, highlight=False, soft_wrap=True)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", help="Show version"),
) -> None:
    """MCP Editor - view and edit text files with undo history.

    \b
    Examples:
        mcp-editor serve                                  # Run the MCP server on stdio
        mcp-editor view /tmp/a.txt --start 2 --end 5      # Show lines 2-5
        mcp-editor replace /tmp/a.txt --old two --new TWO # Replace a unique string
        mcp-editor insert /tmp/a.txt --line 1 --text X    # Insert after line 1
        mcp-editor config show                            # Show effective configuration
    """
    if version_flag:
        console.print(f"MCP Editor version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command("serve")
def serve_command() -> None:
    """Run the editor MCP server on stdio."""
    from mcp_editor.server.stdio import run_stdio_server

    settings = _load_settings_or_exit()
    log_file = setup_session_logging(config=settings)
    err_console.print(f"[dim]Logging to {escape(log_file)}[/dim]")

    try:
        asyncio.run(run_stdio_server(settings))
    except KeyboardInterrupt:
        logger.info("Server interrupted")
        raise typer.Exit(ExitCodes.INTERRUPTED)


@app.command("view")
def view_command(
    path: str = typer.Argument(..., help="Absolute path to the file or directory"),
    start: int = typer.Option(None, "--start", help="First line to show (1-based)"),
    end: int = typer.Option(None, "--end", help="Last line to show (-1 for end of file)"),
) -> None:
    """View a file with line numbers, or list a directory."""
    arguments: dict[str, Any] = {"path": path}
    if start is not None or end is not None:
        arguments["view_range"] = [
            start if start is not None else 1,
            end if end is not None else -1,
        ]

    _run_tool("view", arguments)


@app.command("create")
def create_command(
    path: str = typer.Argument(..., help="Absolute path of the file to create"),
    text: str = typer.Option(..., "--text", help="Content of the new file"),
) -> None:
    """Create a new file (never overwrites)."""
    _run_tool("create", {"path": path, "file_text": text})


@app.command("replace")
def replace_command(
    path: str = typer.Argument(..., help="Absolute path to the file"),
    old: str = typer.Option(..., "--old", help="Exact text to replace"),
    new: str = typer.Option("", "--new", help="Replacement text"),
    replace_all: bool = typer.Option(False, "--all", help="Replace every occurrence"),
) -> None:
    """Replace a literal string in a file."""
    _run_tool(
        "string_replace",
        {"path": path, "old_str": old, "new_str": new, "replace_all": replace_all},
    )


@app.command("insert")
def insert_command(
    path: str = typer.Argument(..., help="Absolute path to the file"),
    line: int = typer.Option(..., "--line", help="Insert after this many lines (0 = top)"),
    text: str = typer.Option(..., "--text", help="Text to insert"),
) -> None:
    """Insert text after a given line."""
    _run_tool("insert", {"path": path, "insert_line": line, "new_str": text})


# Config command group
config_app = typer.Typer(help="Manage editor configuration")
app.add_typer(config_app, name="config")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Config command callback - shows help if no subcommand given."""
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@config_app.command("show")
def config_show_command() -> None:
    """Display current effective configuration (file + environment)."""
    settings = _load_settings_or_exit()
    config_path = get_config_path()

    table = Table(title="MCP Editor Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("editor.snippet_lines", str(settings.editor.snippet_lines))
    table.add_row("editor.tab_size", str(settings.editor.tab_size))
    table.add_row("editor.listing_depth", str(settings.editor.listing_depth))
    table.add_row("server.name", settings.server.name)
    table.add_row("server.version", settings.server.version)
    table.add_row("logging.level", settings.logging.level)
    table.add_row("logging.data_dir", settings.logging.data_dir)

    console.print(table)
    if config_path.exists():
        console.print(f"[dim]Configuration file: {escape(str(config_path))}[/dim]")
    else:
        console.print(f"[dim]No configuration file at {escape(str(config_path))} (defaults)[/dim]")


@config_app.command("init")
def config_init_command(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file"),
) -> None:
    """Write a configuration file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(
            f"[yellow]Configuration already exists at {escape(str(config_path))}[/yellow] "
            "(use --force to overwrite)"
        )
        return

    try:
        save_config(EditorSettings(), config_path)
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCodes.GENERAL_ERROR)

    console.print(f"[green]Configuration written to {escape(str(config_path))}[/green]")


if __name__ == "__main__":
    app()
