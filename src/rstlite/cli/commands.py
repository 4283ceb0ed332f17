"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from rstlite.config import Settings, load_config
from rstlite.core.grammar.recognizer import grammar_text
from rstlite.core.parse import discover_files, parse_file
from rstlite.core.pipeline import run_parse
from rstlite.exceptions import RstliteError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Parse a subset of reStructuredText into structured documents."""
    level = "DEBUG" if verbose else _settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Source file encoding")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print JSON instead of writing files")] = False,
    ):
    """Parse .rst/.txt files and export each document as JSON."""
    settings = _settings(overrides={"output_dir": out, "encoding": encoding})

    if stdout:
        files = discover_files(Path(path))
        if not files:
            _fail(f"No .rst or .txt files found at {path}")
        for p in files:
            try:
                parsed = parse_file(p, settings.encoding)
            except (RstliteError, OSError, UnicodeDecodeError) as e:
                _fail(f"Failed to parse {p}", e)
            typer.echo(parsed.document.model_dump_json(indent=settings.json_indent or None))
        return

    output_dir = Path(settings.output_dir)
    try:
        results = run_parse(path, output_dir, settings.encoding, settings.json_indent)
    except RstliteError as e:
        _fail(str(e))
    if not results:
        _fail(f"No .rst or .txt files found at {path}")
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Parsed {len(results)} document(s) to {output_dir}/")


def grammar_cmd():
    """Print the recognizer grammar as PEG rule definitions."""
    typer.echo(grammar_text())
