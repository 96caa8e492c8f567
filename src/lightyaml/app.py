"""Command-line entry point for lightyaml."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from lightyaml import get_version
from lightyaml.config import ParserOptions, load_options
from lightyaml.convert import select
from lightyaml.errors import LightYamlError
from lightyaml.loader import load, load_stream
from lightyaml.reporting.report import OUTPUT_FORMATS, emit_document
from lightyaml.values import Document

app = typer.Typer(help="lightyaml: parse indentation-structured YAML data files.")

_MISSING = object()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _build_options(
    config_file: Path | None,
    strict: bool,
    tab_width: int | None,
) -> ParserOptions:
    overrides_raw: dict[str, Any] = {
        "indentation.mode": "strict" if strict else None,
        "indentation.tab_width": tab_width,
    }
    try:
        return load_options(config_path=config_file, overrides=overrides_raw)
    except (ValidationError, LightYamlError) as exc:
        raise _fail(f"Invalid parser options: {exc}") from exc


def _read_document(path: Path | None, use_stdin: bool, options: ParserOptions) -> Document:
    if use_stdin:
        try:
            return load_stream(sys.stdin, options, source="<stdin>")
        except UnicodeDecodeError as exc:
            raise _fail(f"Could not decode <stdin>: {exc.reason} at byte {exc.start}") from exc
    if path is None:
        raise _fail("Must specify a data path or use --stdin")
    document = load(path, options)
    if document.errors:
        raise _fail("; ".join(document.errors))
    return document


@app.command()
def dump(
    path: Path | None = typer.Argument(None, help="Path to the data file to parse."),
    use_stdin: bool = typer.Option(False, "--stdin", "-s", help="Read data from stdin."),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or tree."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write output to this file."),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional option file (same dialect) to load before applying CLI overrides.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject indentation that is not a multiple of the document unit.",
    ),
    tab_width: int | None = typer.Option(None, "--tab-width", help="Columns counted per leading tab."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
) -> None:
    """Parse a data file and print it as JSON or as a tree."""
    _configure_logging(log_level)
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"format must be one of {', '.join(OUTPUT_FORMATS)}")

    options = _build_options(config_file, strict, tab_width)
    try:
        document = _read_document(path, use_stdin, options)
    except LightYamlError as exc:
        raise _fail(str(exc)) from exc

    with document:
        emit_document(document, fmt=fmt, output_path=output)


@app.command()
def get(
    path: Path = typer.Argument(..., help="Path to the data file to parse."),
    key: str = typer.Argument(..., help="Dotted path to the value, e.g. server.ports.0"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Optional option file."),
    strict: bool = typer.Option(False, "--strict", help="Reject irregular indentation."),
    tab_width: int | None = typer.Option(None, "--tab-width", help="Columns counted per leading tab."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
) -> None:
    """Print the value at a dotted path as JSON."""
    _configure_logging(log_level)
    options = _build_options(config_file, strict, tab_width)
    try:
        document = _read_document(path, False, options)
    except LightYamlError as exc:
        raise _fail(str(exc)) from exc

    with document:
        found = select(document, key, default=_MISSING)
    if found is _MISSING:
        raise _fail(f"Key '{key}' was not found in {path}")
    typer.echo(json.dumps(found, ensure_ascii=False))


@app.command()
def version() -> None:
    """Print the lightyaml version."""
    typer.echo(f"lightyaml v{get_version()}")


if __name__ == "__main__":  # pragma: no cover
    app()
