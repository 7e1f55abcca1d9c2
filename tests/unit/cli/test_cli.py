"""
Unit tests for the daylio-pixels command line.
"""
import json
from pathlib import Path

from typer.testing import CliRunner

from daylio_pixels import __version__
from daylio_pixels.cli.cli import app
from tests.helpers import daylio_entry, pixels_day

runner = CliRunner()


def test_daylio_to_pixels(write_daylio_backup):
    source = write_daylio_backup([daylio_entry(2023, 0, 5, 2, note="hello")])

    result = runner.invoke(app, ["-d", str(source)])

    assert result.exit_code == 0, result.output
    assert "CONVERSION NOTES" in result.output
    assert "Successfully converted" in result.output
    days = json.loads(Path(f"{source}-converted.json").read_text(encoding="utf-8"))
    assert days[0]["entries"][0]["value"] == 4


def test_pixels_to_daylio_with_pretty_dump(tmp_path):
    source = tmp_path / "pixels.json"
    source.write_text(json.dumps([pixels_day("2023-01-05", 3)]), encoding="utf-8")

    result = runner.invoke(
        app, ["--pixels", str(source), "--pretty-dump", "--timestamp-unit", "seconds"]
    )

    assert result.exit_code == 0, result.output
    assert Path(f"{source}-converted.daylio").is_file()
    assert Path(f"{source}-pretty.json").is_file()


def test_both_inputs_is_usage_error(tmp_path):
    daylio = tmp_path / "a.daylio"
    pixels = tmp_path / "b.json"

    result = runner.invoke(app, ["-d", str(daylio), "-p", str(pixels)])

    assert result.exit_code == 2
    assert list(tmp_path.iterdir()) == []


def test_no_input_is_usage_error():
    result = runner.invoke(app, [])

    assert result.exit_code == 2


def test_help():
    result = runner.invoke(app, ["-h"])

    assert result.exit_code == 0
    assert "--daylio" in result.output
    assert "--pixels" in result.output


def test_conversion_failure_exits_non_zero(tmp_path):
    source = tmp_path / "pixels.json"
    source.write_text("not json", encoding="utf-8")

    result = runner.invoke(app, ["-p", str(source)])

    assert result.exit_code == 1
    assert "Conversion failed" in result.output
    assert [p.name for p in tmp_path.iterdir()] == ["pixels.json"]


def test_missing_input_exits_non_zero(tmp_path):
    result = runner.invoke(app, ["-d", str(tmp_path / "absent.daylio")])

    assert result.exit_code == 1
    assert list(tmp_path.iterdir()) == []


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
