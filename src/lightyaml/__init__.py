"""
lightyaml package initialisation.

Parses a restricted, indentation-structured YAML subset into a tree of
tagged values.
"""

from importlib import metadata

from lightyaml.config import ParserOptions, load_options
from lightyaml.convert import select, to_builtin, to_json
from lightyaml.errors import (
    IrregularIndentationError,
    LightYamlError,
    SourceUnavailableError,
    TypeMismatchError,
    ValueLookupError,
)
from lightyaml.loader import load, load_stream, parse_lines, parse_string
from lightyaml.values import Document, Value, ValueType


def get_version() -> str:
    """Return the installed package version, falling back to source version during development."""
    try:
        return metadata.version("lightyaml")
    except metadata.PackageNotFoundError:  # pragma: no cover - only occurs during dev
        return "0.1.0"


__all__ = [
    "Document",
    "IrregularIndentationError",
    "LightYamlError",
    "ParserOptions",
    "SourceUnavailableError",
    "TypeMismatchError",
    "Value",
    "ValueLookupError",
    "ValueType",
    "get_version",
    "load",
    "load_options",
    "load_stream",
    "parse_lines",
    "parse_string",
    "select",
    "to_builtin",
    "to_json",
]
