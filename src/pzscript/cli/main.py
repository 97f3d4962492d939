"""CLI entry point for pzscript.

Invoked as::

    pzscript [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m pzscript.cli.main

Commands
--------
check       Parse a script file and list its definitions
parse       Dump the parsed script to JSON or YAML
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from pzscript.ast.nodes import Module

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a script file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _parse_or_exit(source: str, path: str) -> "Module[Any]":
    """Parse script source, printing the error and exiting on failure."""
    from pzscript import ParseError, parse_script

    try:
        return parse_script(source)
    except ParseError as exc:
        err_console.print(f"[red]Parse error[/red] in {path}:{exc.position}: {exc.message}")
        lines = source.splitlines()
        line = lines[exc.position.line - 1] if exc.position.line <= len(lines) else ""
        if line.strip():
            err_console.print(f"  {line}", markup=False, highlight=False)
            err_console.print(" " * (exc.position.col + 1) + "^", highlight=False)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="pzscript")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Parser for block-structured game script definitions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from pzscript import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]pzscript[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
def check_command(file: str) -> None:
    """Parse a script file and list the definitions it contains.

    FILE is the path to the script file to check.
    """
    source = _read_source(file)
    parsed = _parse_or_exit(source, file)

    table = Table(title=f"Definitions: {file}")
    table.add_column("Module", style="bold")
    table.add_column("Kind")
    table.add_column("Name")

    count = 0
    for block in parsed.blocks:
        for definition in block.definitions:
            table.add_row(block.name, type(definition).__name__.lower(), definition.name)
            count += 1

    console.print(table)
    console.print(
        f"\n[green]OK[/green] {file}: {len(parsed.blocks)} module(s), {count} definition(s)"
    )


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(file: str, output_format: str, output: str | None) -> None:
    """Parse a script file and dump the parsed definitions.

    FILE is the path to the script file to parse.
    """
    from pzscript.ast import ScriptSerializer

    source = _read_source(file)
    parsed = _parse_or_exit(source, file)

    serializer = ScriptSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(parsed, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(parsed)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Parsed script written to[/green] {output}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


if __name__ == "__main__":
    cli()
