"""Terminal colors for table cells."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.color import ColorSystem
from rich.style import Style

# Any color name rich understands, e.g. "red" or "bright_blue".
ColorAttribute = str

COLUMN_PALETTE: tuple[ColorAttribute, ...] = ("red", "magenta", "blue", "white")
ROW_PALETTE: tuple[ColorAttribute, ...] = ("yellow", "green")

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}


class Colorizer(Protocol):
    """Applies a color attribute to a piece of text."""

    def __call__(self, text: str, attribute: ColorAttribute) -> str: ...


def plain(text: str, attribute: ColorAttribute) -> str:
    """Colorizer that leaves text untouched."""
    return text


class AnsiColorizer:
    """Wrap text in ANSI escape codes using rich styles."""

    def __init__(self, color_system: str = "standard", bold: bool = True) -> None:
        """Initialize the colorizer.

        Args:
            color_system: One of "standard", "256" or "truecolor"
            bold: Render colored text in bold as well
        """
        self.color_system = _COLOR_SYSTEMS[color_system]
        self.bold = bold
        self._styles: dict[ColorAttribute, Style] = {}

    def _style(self, attribute: ColorAttribute) -> Style:
        style = self._styles.get(attribute)
        if style is None:
            style = Style(color=attribute, bold=self.bold)
            self._styles[attribute] = style
        return style

    def __call__(self, text: str, attribute: ColorAttribute) -> str:
        return self._style(attribute).render(text, color_system=self.color_system)


def palette_color(palette: Sequence[ColorAttribute], position: int) -> ColorAttribute:
    """Pick the palette entry for a column or row position, wrapping around."""
    return palette[position % len(palette)]


__all__ = [
    "AnsiColorizer",
    "COLUMN_PALETTE",
    "ColorAttribute",
    "Colorizer",
    "ROW_PALETTE",
    "palette_color",
    "plain",
]
