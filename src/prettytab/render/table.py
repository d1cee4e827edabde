"""Table layout: banner, borders, header row and data rows."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from prettytab.colors import (
    COLUMN_PALETTE,
    ROW_PALETTE,
    AnsiColorizer,
    ColorAttribute,
    Colorizer,
    palette_color,
    plain,
)
from prettytab.config import RenderConfig
from prettytab.errors import ConfigError, RowArityError
from prettytab.measure import visual_length

from .cell import Justify, render_cell

if TYPE_CHECKING:
    from prettytab.models.table import Table

logger = logging.getLogger(__name__)


def border_line(widths: Sequence[int]) -> str:
    """Build a ``+----+---+`` border for the given column widths."""
    # Each cell has a single space margin on both sides.
    return "+" + "+".join("-" * (width + 2) for width in widths) + "+"


def render_banner(header: str) -> tuple[str, int]:
    """Render the banner block shown above the table.

    Returns:
        The rendered banner and the length of its horizontal rule
    """
    rule = "-" * (visual_length(header) + 2)
    return f"{rule}\n {header} |\n", len(rule)


def render_row(
    widths: Sequence[int],
    contents: Sequence[str],
    palette: Sequence[ColorAttribute],
    justify: Justify,
    colorize: Colorizer = plain,
) -> str:
    """Render one ``| cell | cell |`` line, without the trailing newline."""
    cells = [
        render_cell(content, widths[i], justify, palette_color(palette, i), colorize)
        for i, content in enumerate(contents)
    ]
    return "|" + "|".join(cells) + "|"


class TableRenderer:
    """Turns a :class:`~prettytab.models.table.Table` into bordered text."""

    def __init__(
        self,
        colorize: Colorizer = plain,
        column_palette: Sequence[ColorAttribute] = COLUMN_PALETTE,
        row_palette: Sequence[ColorAttribute] = ROW_PALETTE,
    ) -> None:
        """Initialize the renderer.

        Args:
            colorize: Colorizer applied to every cell (identity by default)
            column_palette: Header colors, one per column position
            row_palette: Data colors, one per row position
        """
        if not column_palette or not row_palette:
            raise ConfigError("palettes must contain at least one color")
        self.colorize = colorize
        self.column_palette = tuple(column_palette)
        self.row_palette = tuple(row_palette)

    @classmethod
    def from_config(cls, config: RenderConfig, stream: TextIO | None = None) -> TableRenderer:
        """Create a renderer for output written to ``stream``."""
        colorize: Colorizer = plain
        if config.colors_enabled(stream):
            colorize = AnsiColorizer(bold=config.bold)
        return cls(
            colorize=colorize,
            column_palette=config.column_palette,
            row_palette=config.row_palette,
        )

    @classmethod
    def default(cls) -> TableRenderer:
        """Renderer configured from the environment, targeting stdout."""
        return cls.from_config(RenderConfig.from_env(), sys.stdout)

    def render(self, table: Table) -> str:
        """Render ``table`` as a block of text ending in a newline.

        Raises:
            RowArityError: If any row does not match the column count
        """
        columns = table.columns
        rows = table.state.rows
        for index, row in enumerate(rows):
            if len(row) != len(columns):
                raise RowArityError(len(columns), len(row), index)

        widths = table.column_widths()
        parts: list[str] = []

        # The upper border grows to the banner's rule when the banner is wider.
        banner_length = 0
        if table.header is not None:
            banner, banner_length = render_banner(table.header)
            parts.append(banner)

        border = border_line(widths)
        upper_border = border
        if banner_length > len(upper_border):
            upper_border += "-" * (banner_length - len(upper_border))
        parts.append(upper_border + "\n")

        names = [col.name for col in columns]
        parts.append(
            render_row(widths, names, self.column_palette, Justify.LEFT, self.colorize) + "\n"
        )
        parts.append(border + "\n")

        for position, row in enumerate(rows):
            color = palette_color(self.row_palette, position)
            parts.append(render_row(widths, row, (color,), Justify.RIGHT, self.colorize) + "\n")

        parts.append(border + "\n")

        if table.show_row_count:
            parts.append(f"Count: {len(rows)}\n")

        return "".join(parts)

    def print(self, table: Table, file: TextIO | None = None) -> None:
        """Render ``table`` and write it, plus a newline, to ``file`` (stdout by default)."""
        text = self.render(table)
        out = file if file is not None else sys.stdout
        logger.debug(
            "Writing table with %d columns and %d rows", len(table.columns), len(table)
        )
        out.write(text + "\n")


__all__ = ["TableRenderer", "border_line", "render_banner", "render_row"]
