"""prettytab - bordered, fixed-width text tables for the terminal.

Example:
    from prettytab import Table, column

    table = Table(column("Name"), column("Type"))
    table.add_row("Noel", "Human")
    table.print()
"""

from __future__ import annotations

from typing import Any

from prettytab.colors import COLUMN_PALETTE, ROW_PALETTE, AnsiColorizer, plain
from prettytab.config import RenderConfig
from prettytab.errors import ConfigError, PrettyTabError, RowArityError
from prettytab.measure import truncate_to_visual_length, visual_length
from prettytab.models import ColumnSpec, Table, column, column_with_width
from prettytab.render import Justify, TableRenderer, render_cell

__version__ = "0.1.0"


# The CLI pulls in typer, so load it only on demand
def __getattr__(name: str) -> Any:
    """Lazy import of the command-line entry point."""
    if name == "main":
        from prettytab.cli import main

        return main
    raise AttributeError(f"module 'prettytab' has no attribute {name!r}")


__all__ = [
    "__version__",
    "main",
    # Errors
    "ConfigError",
    "PrettyTabError",
    "RowArityError",
    # Measurement
    "truncate_to_visual_length",
    "visual_length",
    # Models
    "ColumnSpec",
    "Table",
    "column",
    "column_with_width",
    # Rendering
    "AnsiColorizer",
    "COLUMN_PALETTE",
    "Justify",
    "ROW_PALETTE",
    "RenderConfig",
    "TableRenderer",
    "plain",
    "render_cell",
]
