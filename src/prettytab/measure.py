"""Visual width measurement for terminal text.

Combining marks (accents, diacritics) are drawn in the same terminal column as
the character before them, so they do not count towards the printed width.
"""

from __future__ import annotations

import unicodedata


def is_mark(char: str) -> bool:
    """Return True for code points in the Unicode mark categories (Mn, Mc, Me)."""
    return unicodedata.category(char).startswith("M")


def visual_length(text: str) -> int:
    """Count the code points of ``text`` that occupy a terminal column."""
    return sum(1 for char in text if not is_mark(char))


def truncate_to_visual_length(text: str, length: int) -> str:
    """Return the longest prefix of ``text`` whose visual length is ``length``.

    Marks that follow the last counted character stay attached to it, so a
    base character is never separated from its combining marks.

    Args:
        text: String to truncate
        length: Visual length budget; ``<= 0`` yields an empty string

    Returns:
        The prefix, or ``text`` itself when it already fits
    """
    if length <= 0:
        return ""

    cut = 0
    counted = 0
    for char in text:
        if not is_mark(char):
            if counted == length:
                break
            counted += 1
        cut += 1
    return text[:cut]


__all__ = ["is_mark", "truncate_to_visual_length", "visual_length"]
