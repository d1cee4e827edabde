"""Tests for visual width measurement and truncation."""

from __future__ import annotations

import pytest

from prettytab.measure import is_mark, truncate_to_visual_length, visual_length

# "a" with a dot below, drawn as a single character.
A_DOT = "a\u0323"
# "o" with two marks below.
O_MARKS = "o\u0324\u0323"


def test_is_mark_covers_all_mark_categories() -> None:
    assert is_mark("\u0301")  # Mn, combining acute accent
    assert is_mark("\u0903")  # Mc, devanagari visarga
    assert is_mark("\u20dd")  # Me, enclosing circle
    assert not is_mark("a")
    assert not is_mark(" ")


def test_visual_length_ascii() -> None:
    assert visual_length("") == 0
    assert visual_length("Pranava") == 7


def test_visual_length_ignores_combining_marks() -> None:
    assert visual_length(A_DOT) == 1
    assert visual_length(O_MARKS * 15) == 15
    assert visual_length(f"01234{A_DOT}56789") == 11
    assert visual_length(f"Funda{O_MARKS}o") == 7


def test_truncate_keeps_marks_with_their_base() -> None:
    assert truncate_to_visual_length(f"01234{A_DOT}56789", 7) == f"01234{A_DOT}5"
    assert truncate_to_visual_length(f"01234{A_DOT}56789", 6) == f"01234{A_DOT}"
    assert truncate_to_visual_length(f"0123{O_MARKS}456789", 5) == f"0123{O_MARKS}"


def test_truncate_includes_trailing_marks() -> None:
    assert truncate_to_visual_length(f"b{A_DOT}", 2) == f"b{A_DOT}"
    assert truncate_to_visual_length(f"{A_DOT}b", 1) == A_DOT


def test_truncate_longer_budget_returns_text_unchanged() -> None:
    text = f"x{O_MARKS}"
    assert truncate_to_visual_length(text, 2) == text
    assert truncate_to_visual_length(text, 50) == text


@pytest.mark.parametrize("length", [0, -1, -10])
def test_truncate_non_positive_budget_is_empty(length: int) -> None:
    assert truncate_to_visual_length("abc", length) == ""


def test_truncate_never_strands_a_mark() -> None:
    text = f"{O_MARKS}x{A_DOT}{A_DOT}yz{O_MARKS}"
    for length in range(visual_length(text) + 2):
        prefix = truncate_to_visual_length(text, length)
        assert text.startswith(prefix)
        assert visual_length(prefix) == min(length, visual_length(text))
        assert visual_length(prefix + "...") <= length + 3
        rest = text[len(prefix):]
        assert not rest or not is_mark(rest[0])
