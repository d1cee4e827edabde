"""Rendering configuration."""

from __future__ import annotations

import logging
import os
from typing import Any, Literal, TextIO

from pydantic import BaseModel, Field, field_validator
from rich.color import Color, ColorParseError

from prettytab.colors import COLUMN_PALETTE, ROW_PALETTE, ColorAttribute

ColorMode = Literal["auto", "always", "never"]

_COLOR_MODES = ("auto", "always", "never")

_TRUTHY = ("1", "true", "yes")

logger = logging.getLogger(__name__)


class RenderConfig(BaseModel):
    """Configuration for table rendering."""

    color: ColorMode = Field(
        default="auto",
        description="Colorize cells: auto (only on a terminal), always or never",
    )
    column_palette: tuple[ColorAttribute, ...] = Field(
        default=COLUMN_PALETTE,
        description="Header cell colors, cycled by column position",
    )
    row_palette: tuple[ColorAttribute, ...] = Field(
        default=ROW_PALETTE,
        description="Data cell colors, cycled by row position",
    )
    bold: bool = Field(default=True, description="Render colored cells in bold")

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, value: Any) -> str:
        """Accept mixed case and surrounding whitespace."""
        return str(value).strip().lower()

    @field_validator("column_palette", "row_palette")
    @classmethod
    def validate_palette(cls, value: tuple[ColorAttribute, ...]) -> tuple[ColorAttribute, ...]:
        """Palettes must be non-empty and name colors rich can parse."""
        if not value:
            raise ValueError("palette must contain at least one color")
        for name in value:
            try:
                Color.parse(name)
            except ColorParseError as exc:
                raise ValueError(f"unknown color {name!r}") from exc
        return value

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Create config from environment variables.

        ``NO_COLOR`` wins over ``FORCE_COLOR``, which wins over
        ``PRETTYTAB_COLOR``. An unrecognised ``PRETTYTAB_COLOR`` falls back
        to auto.
        """
        raw = os.getenv("PRETTYTAB_COLOR", "auto")
        color = raw.strip().lower()
        if color not in _COLOR_MODES:
            logger.warning("Ignoring invalid PRETTYTAB_COLOR=%r, using auto", raw)
            color = "auto"
        if os.getenv("FORCE_COLOR", "").lower() in _TRUTHY:
            color = "always"
        if os.getenv("NO_COLOR"):
            color = "never"
        return cls(
            color=color,
            bold=os.getenv("PRETTYTAB_NO_BOLD", "").lower() not in _TRUTHY,
        )

    def colors_enabled(self, stream: TextIO | None = None) -> bool:
        """Decide whether output written to ``stream`` should be colored."""
        if self.color == "always":
            return True
        if self.color == "never" or stream is None:
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


__all__ = ["ColorMode", "RenderConfig"]
