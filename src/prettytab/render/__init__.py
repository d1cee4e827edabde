"""Rendering of cells and whole tables."""

from .cell import ELLIPSIS, Justify, fit_to_width, render_cell
from .table import TableRenderer, border_line, render_banner, render_row

__all__ = [
    # Cells
    "ELLIPSIS",
    "Justify",
    "fit_to_width",
    "render_cell",
    # Tables
    "TableRenderer",
    "border_line",
    "render_banner",
    "render_row",
]
