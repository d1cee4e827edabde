"""Shared fixtures for prettytab tests."""

from __future__ import annotations

import pytest

from prettytab import Table, TableRenderer, column


@pytest.fixture(autouse=True)
def no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the environment from turning colors on during tests."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("PRETTYTAB_NO_BOLD", raising=False)
    monkeypatch.setenv("PRETTYTAB_COLOR", "never")


@pytest.fixture
def renderer() -> TableRenderer:
    return TableRenderer()


@pytest.fixture
def basic_table() -> Table:
    table = Table(
        column("Employee Number"),
        column("Name"),
        column("Type"),
        column("Phone Number"),
    )
    table.add_row("23", "Noel", "Human", "(123) 456-7899")
    table.add_row("83", "David", "Cyborg", "987-654-3211")
    table.add_row("52", "Pranava", "Crusher", "1-800-123-4567")
    table.add_row("1182", "Postnava", "Kitten", "1 (800) 987-6543")
    return table
