"""Pydantic models for columns and tables."""

from .column import MIN_MAX_WIDTH, ColumnSpec, column, column_with_width
from .table import Table, TableState

__all__ = [
    "ColumnSpec",
    "MIN_MAX_WIDTH",
    "Table",
    "TableState",
    "column",
    "column_with_width",
]
