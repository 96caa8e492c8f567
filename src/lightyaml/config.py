"""Parser options and helpers for loading them from files and overrides."""

from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from lightyaml.indentation import DEFAULT_TAB_WIDTH, IndentationMode

LOG = logging.getLogger(__name__)

TAB_WIDTH_ENV = "LIGHTYAML_TAB_WIDTH"


def _default_tab_width() -> int:
    raw = os.environ.get(TAB_WIDTH_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_TAB_WIDTH
    try:
        return int(raw)
    except ValueError:
        LOG.warning(
            "Ignoring %s=%r: not an integer, using %d", TAB_WIDTH_ENV, raw, DEFAULT_TAB_WIDTH
        )
        return DEFAULT_TAB_WIDTH


class IndentationOptions(BaseModel):
    """How leading whitespace is measured and validated."""

    tab_width: int = Field(
        default_factory=_default_tab_width,
        ge=1,
        le=16,
        description="Columns counted for each leading tab.",
    )
    mode: IndentationMode = Field(
        default="lenient",
        description="'strict' rejects indentation that is not a multiple of the document unit.",
    )


class CommentOptions(BaseModel):
    """Comment stripping behaviour."""

    quote_aware: bool = Field(
        default=False,
        description="Keep '#' characters that appear inside quoted runs.",
    )


class SourceOptions(BaseModel):
    """Settings for reading the input source."""

    encoding: str = Field(default="utf-8")
    raise_on_missing: bool = Field(
        default=False,
        description="Raise SourceUnavailableError instead of returning an empty document.",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Ensure the codec exists so failures surface at configuration time."""
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'") from exc
        return value


class ParserOptions(BaseModel):
    """Top-level configuration for a parse."""

    indentation: IndentationOptions = Field(default_factory=IndentationOptions)
    comments: CommentOptions = Field(default_factory=CommentOptions)
    source: SourceOptions = Field(default_factory=SourceOptions)


def load_options(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ParserOptions:
    """
    Build ParserOptions from defaults, an optional option file and overrides.

    The option file uses the same restricted YAML dialect the parser reads.
    Overrides are matched to nested keys using dotted notation
    (e.g. ``indentation.mode=strict``).
    """
    merged: Dict[str, Any] = ParserOptions().model_dump()

    if config_path:
        from lightyaml.convert import to_builtin
        from lightyaml.loader import load

        file_conf = to_builtin(load(config_path, ParserOptions(source=SourceOptions(raise_on_missing=True))))
        merged = _deep_merge(merged, file_conf)

    if overrides:
        for dotted_key, value in overrides.items():
            if value is None:
                continue
            _apply_override(merged, dotted_key, value)

    return ParserOptions.model_validate(merged)


def _deep_merge(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in extra.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            base[key] = _deep_merge(dict(base[key]), value)
        else:
            base[key] = value
    return base


def _apply_override(target: Dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    current = target
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value
