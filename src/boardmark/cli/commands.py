"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from boardmark.config import Settings, load_config
from boardmark.core.export import build_sidecar, dump_sidecar
from boardmark.core.extract.extract import extract_note
from boardmark.core.parse import parse_file
from boardmark.core.pipeline import run_extract


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def parse_cmd(
    path: Annotated[Path, typer.Argument(help="Note file to parse")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Print the parsed block sequence of a single note."""
    settings = _settings(overrides={"output_format": fmt})
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        note = extract_note(parse_file(path))
    except ValueError as e:
        _fail(f"Could not read {path}", e)
    typer.echo(dump_sidecar(build_sidecar(note, settings), settings.output_format, settings.indent))


def extract_cmd(
    path: Annotated[str, typer.Argument(help="Note file or directory to extract from")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Recursively parse notes and write one structured file per note."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt})
    output_dir = Path(settings.output_dir)
    try:
        results = run_extract(path, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .txt/.md notes found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Extracted {len(results)} note(s) to {output_dir}/")


def config_cmd():
    """Print the effective settings."""
    settings = _settings()
    typer.echo(yaml.dump(settings.model_dump(), default_flow_style=False, sort_keys=False).rstrip())
