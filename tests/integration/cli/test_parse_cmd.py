"""Integration tests for the parse and grammar commands"""

import json

import pytest
from typer.testing import CliRunner

from rstlite.cli.cli import app


SAMPLE = "Title\n=====\n\nBody text.\n\nExample::\n\n    print('hi')\n"


@pytest.fixture(name="runner")
def runner_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("ENCODING", "OUTPUT_DIR", "JSON_INDENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"RSTLITE_{name}", raising=False)
    return CliRunner()


def test_parse_cmd_writes_json(runner, tmp_path):
    """parse writes a JSON document per source file into --out-dir."""
    (tmp_path / "hello.rst").write_text(SAMPLE)
    result = runner.invoke(app, ["parse", "hello.rst", "--out-dir", str(tmp_path / "out")])
    assert result.exit_code == 0, result.output
    assert "Parsed 1 document(s)" in result.output
    data = json.loads((tmp_path / "out" / "hello.json").read_text())
    assert [b["type"] for b in data["document"]["blocks"]] == ["header", "paragraph", "paragraph", "code"]


def test_parse_cmd_uses_config_output_dir(runner, tmp_path):
    (tmp_path / "config.yaml").write_text("output_dir: exported\n")
    (tmp_path / "hello.rst").write_text(SAMPLE)
    result = runner.invoke(app, ["parse", "hello.rst"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "exported" / "hello.json").exists()


def test_parse_cmd_stdout(runner, tmp_path):
    """--stdout prints the document JSON instead of writing files."""
    (tmp_path / "hello.rst").write_text(SAMPLE)
    result = runner.invoke(app, ["parse", "hello.rst", "--stdout"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["blocks"][3]["lines"] == ["print('hi')"]
    assert not (tmp_path / "dist").exists()


def test_parse_cmd_recognition_error(runner, tmp_path):
    """Malformed input exits 1 with an error message."""
    (tmp_path / "bad.rst").write_text("Title\n=-=-=-\n")
    result = runner.invoke(app, ["parse", "bad.rst", "--out-dir", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "line 2" in result.output


def test_parse_cmd_no_files(runner, tmp_path):
    result = runner.invoke(app, ["parse", str(tmp_path), "--out-dir", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert "No .rst or .txt files" in result.output


def test_grammar_cmd(runner):
    result = runner.invoke(app, ["grammar"])
    assert result.exit_code == 0
    assert result.output.startswith("document <- ")
    assert "border_equals <- " in result.output


def test_verbose_flag(runner, tmp_path):
    (tmp_path / "hello.rst").write_text(SAMPLE)
    result = runner.invoke(app, ["--verbose", "parse", "hello.rst", "--stdout"])
    assert result.exit_code == 0, result.output
