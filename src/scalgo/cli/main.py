"""CLI entry point for scalgo.

Invoked as::

    scalgo [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m scalgo.cli.main

Commands
--------
show        Parse a document and display its records on the scale unit
parse       Dump the parsed enlistment to JSON or YAML
fmt         Format a document to canonical style
units       List registered unit categories and their aliases
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from scalgo.model.enlistment import Enlistment
    from scalgo.units.base import Unit

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a document, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except UnicodeDecodeError as exc:
        err_console.print(f"[red]Error:[/red] {escape(path)} is not valid UTF-8: {escape(str(exc))}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _parse_or_exit(source: str, path: str) -> "Enlistment":
    """Parse document text, printing the error and exiting on failure."""
    from scalgo.errors import ScalgoError
    from scalgo.parser import parse

    try:
        return parse(source)
    except ScalgoError as exc:
        where = f"{path}:{exc.line}" if exc.line is not None else path
        err_console.print(f"[red]Parse error[/red] in {escape(where)}: {escape(str(exc))}")
        sys.exit(1)
    except ValueError as exc:
        err_console.print(f"[red]Invalid number[/red] in {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _format_value(value: float) -> str:
    return f"{value:.6g}"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="scalgo")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging on stderr")
def cli(verbose: bool) -> None:
    """Parse labeled, unit-tagged measurements and put them on one scale."""
    from scalgo.units import unit_registry

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        logging.getLogger("scalgo").setLevel(logging.DEBUG)
    unit_registry.load_entrypoints()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from scalgo import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]scalgo[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# units command
# ---------------------------------------------------------------------------


@cli.command(name="units")
def units_command() -> None:
    """List registered unit categories and the spellings each accepts."""
    from scalgo.units import unit_registry

    table = Table(title="Units", show_lines=False)
    table.add_column("Category", style="bold")
    table.add_column("Unit")
    table.add_column("Base units", justify="right")
    table.add_column("Aliases")

    for category in unit_registry.list_categories():
        grouped: dict["Unit", list[str]] = {}
        for alias, unit in unit_registry.aliases(category).items():
            grouped.setdefault(unit, []).append(alias)
        if not grouped:
            table.add_row(category, "[dim](no alias table)[/dim]", "", "")
        for unit, aliases in grouped.items():
            table.add_row(category, unit.name, str(unit.factor), ", ".join(aliases))

    console.print(table)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("file", type=click.Path(exists=False))
def show_command(file: str) -> None:
    """Parse a document and show every record on the scale unit.

    FILE is the path to the document. The reference record is marked
    with an asterisk.
    """
    source = _read_source(file)
    enlistment = _parse_or_exit(source, file)

    scale = enlistment.scale_unit
    scale_name = scale.name if scale is not None else "base units"
    ref = enlistment.ref_record

    table = Table(title=f"Records: {escape(file)}", show_lines=False)
    table.add_column("", min_width=1)
    table.add_column("Label", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Unit")
    table.add_column(f"In {scale_name}", justify="right")

    for record, scaled in enlistment.scaled_values():
        marker = "[green]*[/green]" if record is ref else ""
        table.add_row(
            marker,
            escape(record.label),
            _format_value(record.value),
            record.unit.name if record.unit is not None else "-",
            _format_value(scaled),
        )

    console.print(table)
    console.print(
        f"\n[bold]Scale:[/bold] {scale_name}  "
        f"[bold]Sorted:[/bold] {str(enlistment.sorted).lower()}  "
        f"[bold]Reversed:[/bold] {str(enlistment.reversed).lower()}"
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
    """Parse a document and dump the enlistment.

    FILE is the path to the document to parse.
    """
    from scalgo.model import EnlistmentSerializer

    source = _read_source(file)
    enlistment = _parse_or_exit(source, file)

    serializer = EnlistmentSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(enlistment, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(enlistment)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Enlistment written to[/green] {escape(output)}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


# ---------------------------------------------------------------------------
# fmt command
# ---------------------------------------------------------------------------


@cli.command(name="fmt")
@click.argument("file", type=click.Path(exists=False))
@click.option("--check", is_flag=True, default=False, help="Check if file is already formatted")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
def fmt_command(file: str, check: bool, in_place: bool) -> None:
    """Format a document to canonical style.

    FILE is the path to the document to format.

    Without --check or --in-place, prints the formatted output to stdout.
    """
    from scalgo.formatter import format_enlistment

    source = _read_source(file)
    enlistment = _parse_or_exit(source, file)
    formatted = format_enlistment(enlistment)

    if check:
        if formatted == source:
            console.print(f"[green]OK[/green] {escape(file)}: already formatted")
            sys.exit(0)
        else:
            console.print(f"[yellow]NEEDS FORMATTING[/yellow] {escape(file)}")
            sys.exit(1)
    elif in_place:
        Path(file).write_text(formatted, encoding="utf-8")
        console.print(f"[green]Formatted[/green] {escape(file)}")
    else:
        click.echo(formatted, nl=False)


if __name__ == "__main__":
    cli()
