"""prettytab exception hierarchy."""

from __future__ import annotations


class PrettyTabError(Exception):
    """Base class for every error raised by prettytab."""


class ConfigError(PrettyTabError, ValueError):
    """Invalid table or column definition, raised at construction time."""


class RowArityError(PrettyTabError, ValueError):
    """A row does not have exactly one cell per column."""

    def __init__(self, expected: int, actual: int, index: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        message = f"row length {actual} must match columns {expected}"
        if index is not None:
            message = f"{message} (row {index})"
        super().__init__(message)


__all__ = ["ConfigError", "PrettyTabError", "RowArityError"]
