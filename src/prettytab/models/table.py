"""Table model: columns, rows and display options."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TextIO

from pydantic import BaseModel, Field

from prettytab.errors import ConfigError, RowArityError
from prettytab.measure import visual_length
from prettytab.render.table import TableRenderer

from .column import ColumnSpec, column


class TableState(BaseModel):
    """Contents of a table."""

    columns: tuple[ColumnSpec, ...] = Field(..., description="Column definitions, in order")
    rows: list[list[str]] = Field(default_factory=list, description="Row cells, in order")
    header: str | None = Field(default=None, description="Banner shown above the table")
    show_row_count: bool = Field(default=False, description="Append a 'Count: N' line")


class Table:
    """A table of string cells rendered as fixed-width text.

    Example:
        table = Table(column("Name"), column("Type"))
        table.add_row("Noel", "Human")
        table.add_row("David", "Cyborg")
        table.print()
    """

    def __init__(self, *columns: ColumnSpec | str) -> None:
        """Initialize a table.

        Args:
            columns: Column definitions; plain strings become unlimited columns

        Raises:
            ConfigError: If no columns are given or a column is invalid
        """
        if not columns:
            raise ConfigError("must have at least 1 column")
        specs = tuple(col if isinstance(col, ColumnSpec) else column(col) for col in columns)
        self.state = TableState(columns=specs)

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self.state.columns

    @property
    def rows(self) -> list[list[str]]:
        """A copy of the rows."""
        return [list(row) for row in self.state.rows]

    @property
    def header(self) -> str | None:
        return self.state.header

    @property
    def show_row_count(self) -> bool:
        return self.state.show_row_count

    def __len__(self) -> int:
        return len(self.state.rows)

    def set_header(self, header: str | None) -> None:
        """Show ``header`` as a banner above the table; ``None`` removes it."""
        self.state.header = header

    def set_show_row_count(self, show_row_count: bool) -> None:
        """Toggle the trailing ``Count: N`` line."""
        self.state.show_row_count = show_row_count

    def _checked_row(self, cells: Iterable[object], index: int | None = None) -> list[str]:
        row = [str(cell) for cell in cells]
        if len(row) != len(self.state.columns):
            raise RowArityError(len(self.state.columns), len(row), index)
        return row

    def add_row(self, *cells: object) -> None:
        """Append a row with one cell per column.

        Raises:
            RowArityError: If the number of cells does not match the columns
        """
        self.state.rows.append(self._checked_row(cells))

    def set_rows(self, rows: Iterable[Sequence[object]]) -> None:
        """Replace every row; nothing changes if any row has the wrong length.

        Raises:
            RowArityError: For the first row whose length does not match
        """
        staged = [self._checked_row(row, index) for index, row in enumerate(rows)]
        self.state.rows = staged

    def column_widths(self) -> list[int]:
        """Rendered width of each column, margins excluded.

        A column is as wide as its name or its widest cell, capped at the
        column's ``max_width`` when it has one.
        """
        widths: list[int] = []
        for i, col in enumerate(self.state.columns):
            width = visual_length(col.name)
            for row in self.state.rows:
                width = max(width, visual_length(row[i]))
            if col.max_width is not None and width > col.max_width:
                width = col.max_width
            widths.append(width)
        return widths

    def render(self, renderer: TableRenderer | None = None) -> str:
        """Render the table to a string.

        Uses :meth:`TableRenderer.default` unless a renderer is given.
        """
        return self._renderer(renderer).render(self)

    def print(self, file: TextIO | None = None, renderer: TableRenderer | None = None) -> None:
        """Render the table and write it to ``file`` (stdout by default)."""
        self._renderer(renderer).print(self, file)

    @staticmethod
    def _renderer(renderer: TableRenderer | None) -> TableRenderer:
        return renderer if renderer is not None else TableRenderer.default()


__all__ = ["Table", "TableState"]
