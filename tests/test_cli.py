"""Tests for the prettytab command line."""

from __future__ import annotations

import pathlib

import pytest
import typer
from typer.testing import CliRunner

from prettytab import ConfigError, RowArityError, __version__
from prettytab.cli import app, build_table, parse_max_widths

runner = CliRunner()

PEOPLE_CSV = "Name,Type\nNoel,Human\nDavid,Cyborg\nPranava,Crusher\n"
PEOPLE_TABLE = (
    "+---------+---------+\n"
    "| Name    | Type    |\n"
    "+---------+---------+\n"
    "|    Noel |   Human |\n"
    "|   David |  Cyborg |\n"
    "| Pranava | Crusher |\n"
    "+---------+---------+\n"
)


@pytest.fixture
def people_csv(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "people.csv"
    path.write_text(PEOPLE_CSV, encoding="utf-8")
    return path


# ============================================================================
# Helpers
# ============================================================================


def test_parse_max_widths() -> None:
    assert parse_max_widths([]) == {}
    assert parse_max_widths(["Name=10", "a=b=12"]) == {"Name": 10, "a=b": 12}


@pytest.mark.parametrize("value", ["Name", "=10", "Name=ten"])
def test_parse_max_widths_rejects_bad_values(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_max_widths([value])


def test_build_table() -> None:
    table = build_table(
        [["Name", "Notes"], ["Noel", "likes tea"]],
        {"Notes": 5},
        header="Staff",
        count=True,
    )
    assert [col.name for col in table.columns] == ["Name", "Notes"]
    assert table.columns[1].max_width == 5
    assert table.rows == [["Noel", "likes tea"]]
    assert table.header == "Staff"
    assert table.show_row_count is True


def test_build_table_errors() -> None:
    with pytest.raises(ConfigError):
        build_table([["Name"]], {"Name": 2})
    with pytest.raises(RowArityError):
        build_table([["Name", "Type"], ["Noel"]])


# ============================================================================
# Commands
# ============================================================================


def test_render_file(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv)])
    assert result.exit_code == 0, result.output
    assert result.output == PEOPLE_TABLE + "\n"


def test_render_stdin() -> None:
    result = runner.invoke(app, ["render", "-"], input=PEOPLE_CSV)
    assert result.exit_code == 0, result.output
    assert result.output == PEOPLE_TABLE + "\n"


def test_no_subcommand_reads_stdin() -> None:
    result = runner.invoke(app, [], input=PEOPLE_CSV)
    assert result.exit_code == 0, result.output
    assert result.output == PEOPLE_TABLE + "\n"


def test_render_with_header_count_and_width(people_csv: pathlib.Path) -> None:
    result = runner.invoke(
        app,
        ["render", str(people_csv), "--header", "Crew", "--count", "-w", "Type=5"],
    )
    assert result.exit_code == 0, result.output
    assert result.output == (
        "------\n"
        " Crew |\n"
        "+---------+-------+\n"
        "| Name    | Type  |\n"
        "+---------+-------+\n"
        "|    Noel | Human |\n"
        "|   David | Cy... |\n"
        "| Pranava | Cr... |\n"
        "+---------+-------+\n"
        "Count: 3\n"
        "\n"
    )


def test_render_with_delimiter(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "people.tsv"
    path.write_text(PEOPLE_CSV.replace(",", "\t"), encoding="utf-8")
    result = runner.invoke(app, ["render", str(path), "-d", "\t"])
    assert result.exit_code == 0, result.output
    assert result.output == PEOPLE_TABLE + "\n"


def test_render_always_color(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv), "--color", "always"])
    assert result.exit_code == 0, result.output
    assert "\x1b[1;31m Name    \x1b[0m" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"prettytab {__version__}"


def test_missing_file(tmp_path: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_empty_input() -> None:
    result = runner.invoke(app, ["render", "-"], input="")
    assert result.exit_code == 1
    assert "input is empty" in result.output


def test_ragged_rows() -> None:
    result = runner.invoke(app, ["render", "-"], input="Name,Type\nNoel\n")
    assert result.exit_code == 1
    assert "row length 1" in result.output


def test_max_width_too_small(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv), "-w", "Name=3"])
    assert result.exit_code == 1
    assert "greater than 3" in result.output


def test_max_width_unknown_column(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv), "-w", "Age=5"])
    assert result.exit_code == 1
    assert "Age" in result.output


def test_max_width_malformed(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv), "-w", "Name"])
    assert result.exit_code == 2


def test_invalid_color_mode(people_csv: pathlib.Path) -> None:
    result = runner.invoke(app, ["render", str(people_csv), "--color", "sometimes"])
    assert result.exit_code == 1
    assert "--color" in result.output


def test_invalid_color_environment_falls_back(
    people_csv: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PRETTYTAB_COLOR", "on")
    result = runner.invoke(app, ["render", str(people_csv)])
    assert result.exit_code == 0, result.output
    assert "--color" not in result.output
    assert PEOPLE_TABLE in result.output
