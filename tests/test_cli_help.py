from __future__ import annotations

from typer.testing import CliRunner

from htmltext.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "convert" in result.stdout


def test_convert_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--help"])
    assert "--in" in result.stdout
    assert "--out" in result.stdout
    assert "--config" in result.stdout
    assert "--show-html" in result.stdout
