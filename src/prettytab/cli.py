"""Command-line interface for prettytab.

Reads CSV and prints it as a bordered table.
"""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import Annotated, TextIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from prettytab import __version__
from prettytab.config import RenderConfig
from prettytab.errors import PrettyTabError
from prettytab.logging import configure_logging
from prettytab.models import ColumnSpec, Table, column
from prettytab.render import TableRenderer

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="prettytab - render CSV as a bordered text table",
)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(message)}[/]", highlight=False)
    return typer.Exit(1)


def parse_max_widths(values: list[str]) -> dict[str, int]:
    """Parse ``NAME=N`` pairs into a column name to width mapping."""
    widths: dict[str, int] = {}
    for value in values:
        name, sep, raw = value.rpartition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected NAME=WIDTH, got {value!r}")
        try:
            widths[name] = int(raw)
        except ValueError as exc:
            raise typer.BadParameter(f"width for {name!r} must be an integer") from exc
    return widths


def build_table(
    records: list[list[str]],
    max_widths: dict[str, int] | None = None,
    header: str | None = None,
    count: bool = False,
) -> Table:
    """Build a table from CSV records; the first record names the columns.

    Raises:
        PrettyTabError: If the records do not form a valid table
    """
    if not records:
        raise PrettyTabError("input is empty")
    max_widths = max_widths or {}
    unknown = sorted(set(max_widths) - set(records[0]))
    if unknown:
        raise PrettyTabError(f"unknown column(s) for --max-width: {', '.join(unknown)}")

    columns: list[ColumnSpec] = [column(name, max_widths.get(name)) for name in records[0]]
    table = Table(*columns)
    table.set_rows(records[1:])
    if header is not None:
        table.set_header(header)
    table.set_show_row_count(count)
    return table


def _read_records(stream: TextIO, delimiter: str) -> list[list[str]]:
    return [record for record in csv.reader(stream, delimiter=delimiter) if record]


@app.command(name="render")
def render(
    source: Annotated[
        str,
        typer.Argument(help="CSV file to read, or '-' for stdin"),
    ] = "-",
    header: Annotated[
        str | None,
        typer.Option("--header", "-H", help="Banner shown above the table"),
    ] = None,
    count: Annotated[
        bool,
        typer.Option("--count", "-c", help="Print the row count after the table"),
    ] = False,
    max_width: Annotated[
        list[str] | None,
        typer.Option(
            "--max-width",
            "-w",
            help="Limit a column's width, as NAME=WIDTH (repeatable)",
        ),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option(
            "--color",
            help="Colorize output: auto, always or never",
        ),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="CSV field delimiter"),
    ] = ",",
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase log verbosity"),
    ] = 0,
) -> None:
    """Render CSV data as a table.

    The first CSV record holds the column names.

    Examples:
        prettytab render people.csv
        prettytab render people.csv --header Employees --count
        cat people.csv | prettytab render - -w Name=10
    """
    configure_logging(verbose)
    widths = parse_max_widths(max_width or [])

    config = RenderConfig.from_env()
    if color is not None:
        try:
            config = RenderConfig(
                color=color,
                column_palette=config.column_palette,
                row_palette=config.row_palette,
                bold=config.bold,
            )
        except ValidationError as exc:
            raise _fail(f"invalid --color value {color!r}") from exc

    try:
        if source == "-":
            logger.debug("Reading CSV from stdin")
            records = _read_records(sys.stdin, delimiter)
        else:
            logger.debug("Reading CSV from %s", source)
            with Path(source).open("r", encoding="utf-8", newline="") as f:
                records = _read_records(f, delimiter)
    except (OSError, csv.Error) as exc:
        raise _fail(f"cannot read {source}: {exc}") from exc

    try:
        table = build_table(records, widths, header=header, count=count)
        renderer = TableRenderer.from_config(config, sys.stdout)
        renderer.print(table, sys.stdout)
    except PrettyTabError as exc:
        raise _fail(str(exc)) from exc


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version"),
    ] = False,
) -> None:
    """prettytab - render CSV as a bordered text table.

    Without a subcommand, renders CSV read from stdin.
    """
    if version:
        typer.echo(f"prettytab {__version__}")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        render(
            source="-",
            header=None,
            count=False,
            max_width=None,
            color=None,
            delimiter=",",
            verbose=0,
        )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
