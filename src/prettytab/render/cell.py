"""Single cell formatting."""

from __future__ import annotations

from enum import Enum

from prettytab.colors import ColorAttribute, Colorizer, plain
from prettytab.errors import ConfigError
from prettytab.measure import truncate_to_visual_length, visual_length

ELLIPSIS = "..."


class Justify(str, Enum):
    """Where cell content sits within its column."""

    LEFT = "left"
    RIGHT = "right"


def fit_to_width(content: str, width: int) -> str:
    """Shorten ``content`` to ``width`` visual columns, ending in an ellipsis.

    Content that already fits is returned as is. ``width`` must be at least
    3 whenever truncation can happen.
    """
    if visual_length(content) <= width:
        return content
    return truncate_to_visual_length(content, width - len(ELLIPSIS)) + ELLIPSIS


def render_cell(
    content: str,
    width: int,
    justify: Justify,
    color: ColorAttribute,
    colorize: Colorizer = plain,
) -> str:
    """Render one cell, including the single space margin on both sides.

    Args:
        content: Raw cell text
        width: Rendered column width, margins excluded
        justify: LEFT pads after the content, RIGHT pads before it
        color: Color attribute handed to ``colorize``
        colorize: Colorizer applied to the padded cell

    Returns:
        The padded, possibly truncated and colorized cell

    Raises:
        ConfigError: If ``justify`` is not a known justification
    """
    text = fit_to_width(content, width)
    padding = " " * (width - visual_length(text))

    if justify == Justify.LEFT:
        cell = f" {text}{padding} "
    elif justify == Justify.RIGHT:
        cell = f" {padding}{text} "
    else:
        raise ConfigError(f"did not match alignment: {justify!r}")
    return colorize(cell, color)


__all__ = ["ELLIPSIS", "Justify", "fit_to_width", "render_cell"]
