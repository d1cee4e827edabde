"""Column definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from prettytab.errors import ConfigError
from prettytab.measure import visual_length

# Room for at least one character plus the "..." ellipsis.
MIN_MAX_WIDTH = 4


class ColumnSpec(BaseModel):
    """A column with a display name and an optional maximum width.

    Build instances with :func:`column` or :func:`column_with_width`, which
    report invalid definitions as :class:`~prettytab.errors.ConfigError`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column display name")
    max_width: int | None = Field(
        default=None,
        description="Maximum rendered width; longer cells are truncated with '...'",
    )

    @model_validator(mode="after")
    def check_max_width(self) -> ColumnSpec:
        """Reject limits that cannot hold an ellipsis or the column name."""
        if self.max_width is None:
            return self
        if self.max_width < MIN_MAX_WIDTH:
            raise ValueError(
                f"column {self.name} max width {self.max_width} must be greater than 3"
            )
        if visual_length(self.name) > self.max_width:
            raise ValueError(
                f"column name {self.name} cannot be longer than max width {self.max_width}"
            )
        return self


def column(name: str, max_width: int | None = None) -> ColumnSpec:
    """Create a column, optionally limited to ``max_width`` characters."""
    try:
        return ColumnSpec(name=name, max_width=max_width)
    except ValidationError as exc:
        message = "; ".join(
            str(err.get("ctx", {}).get("error", err["msg"])) for err in exc.errors()
        )
        raise ConfigError(message) from exc


def column_with_width(name: str, max_width: int) -> ColumnSpec:
    """Create a column whose cells are truncated beyond ``max_width``."""
    return column(name, max_width=max_width)


__all__ = ["ColumnSpec", "MIN_MAX_WIDTH", "column", "column_with_width"]
