"""Tests for the print-table command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pt_ui.cli import app

pytestmark = [pytest.mark.unit_ui, pytest.mark.usefixtures("restore_root_logger")]

DEMO_TABLE = (
    "--------------------------------------\n"
    "|      My Friends' Gaming GPUs       |\n"
    "--------------------------------------\n"
    "| Vendor |  GPU Name  | Release Year |\n"
    "--------------------------------------\n"
    "| Nvidia | GTX 980 Ti |     2015     |\n"
    "| Nvidia |  GTX 1070  |     2016     |\n"
    "| Nvidia |  GTX 1080  |     2016     |\n"
    "| Nvidia |  RTX 2080  |     2018     |\n"
    "--------------------------------------\n"
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_demo_without_reset_prints_table(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--headless", "demo", "--no-reset"])

    assert result.exit_code == 0, result.output
    assert result.output == DEMO_TABLE


def test_demo_reset_reports_missing_data(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--headless", "demo"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith(DEMO_TABLE)
    assert "WARNING: Missing some necessary data to print table" in result.output
    assert result.output.count("| Vendor |") == 1


def test_render_yaml_document(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "gpus.yaml"
    path.write_text(
        "title: GPUs\n"
        "columns: [Vendor, Model]\n"
        "rows:\n"
        "  - [Nvidia, GTX 1080]\n"
        "  - [AMD, RX 580]\n"
    )

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "---------------------",
        "|       GPUs        |",
        "---------------------",
        "| Vendor |  Model   |",
        "---------------------",
        "| Nvidia | GTX 1080 |",
        "|  AMD   |  RX 580  |",
        "---------------------",
    ]


def test_render_incomplete_document_fails(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"title": "Nothing", "columns": ["a"]}))

    result = runner.invoke(app, ["--headless", "render", str(path)])

    assert result.exit_code == 1
    assert "WARNING: Missing some necessary data" in result.output
    assert "---" not in result.output


def test_render_invalid_document_fails(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"title": "T", "unknown": 1}))

    result = runner.invoke(app, ["--headless", "render", str(path)])

    assert result.exit_code == 1
    assert "ERROR: Invalid table document" in result.output


def test_render_reports_malformed_rows(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text(
        json.dumps({"title": "T", "columns": ["a", "b"], "rows": [["1", "2"], ["3"]]})
    )

    result = runner.invoke(app, ["--headless", "render", str(path)])

    assert result.exit_code == 0
    assert "WARNING: Trying to add row with 1 elements" in result.output
    assert "| 1 | 2 |" in result.output


def test_render_non_utf8_document_fails(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes('{"title": "Café", "columns": ["a"], "rows": [["x"]]}'.encode("latin-1"))

    result = runner.invoke(app, ["--headless", "render", str(path)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "ERROR: Cannot decode table document" in result.output
