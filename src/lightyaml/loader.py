"""Public entry points that read a source and return a Document."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from lightyaml.builder import build_document
from lightyaml.config import ParserOptions
from lightyaml.errors import SourceUnavailableError
from lightyaml.normalizer import normalize_lines
from lightyaml.values import Document

LOG = logging.getLogger(__name__)


def parse_lines(
    lines: Iterable[str],
    options: ParserOptions | None = None,
    source: str = "<string>",
) -> Document:
    """Parse an iterable of physical lines in a single pass."""
    options = options or ParserOptions()
    normalized = normalize_lines(
        lines,
        tab_width=options.indentation.tab_width,
        quote_aware_comments=options.comments.quote_aware,
    )
    return build_document(
        normalized.lines,
        normalized.indent_unit,
        tab_width=options.indentation.tab_width,
        mode=options.indentation.mode,
        source=source,
    )


def parse_string(
    text: str,
    options: ParserOptions | None = None,
    source: str = "<string>",
) -> Document:
    """Parse a complete document held in memory."""
    return parse_lines(text.splitlines(), options, source=source)


def load_stream(
    stream: TextIO,
    options: ParserOptions | None = None,
    source: str = "<stream>",
) -> Document:
    """Parse an already-open text stream such as stdin; the caller owns closing it."""
    return parse_lines(stream, options, source=source)


def load(path: Path | str, options: ParserOptions | None = None) -> Document:
    """
    Parse the file at ``path``.

    A path that cannot be opened or decoded is logged and recorded in
    :attr:`Document.errors`, and an empty document is returned, unless
    ``options.source.raise_on_missing`` asks for SourceUnavailableError.
    The file is closed on every exit path, including parse errors.
    """
    options = options or ParserOptions()
    path_obj = Path(path)
    try:
        handle = path_obj.open("r", encoding=options.source.encoding)
    except OSError as exc:
        return _unavailable(path_obj, exc.strerror or str(exc), options, exc)

    try:
        with handle:
            document = parse_lines(handle, options, source=str(path_obj))
    except UnicodeDecodeError as exc:
        reason = f"not valid {options.source.encoding} text ({exc.reason} at byte {exc.start})"
        return _unavailable(path_obj, reason, options, exc)
    LOG.info("Parsed %s: %d top-level keys", path_obj, len(document))
    return document


def _unavailable(
    path: Path,
    reason: str,
    options: ParserOptions,
    cause: Exception,
) -> Document:
    error = SourceUnavailableError(path, reason)
    if options.source.raise_on_missing:
        raise error from cause
    LOG.error("%s", error)
    document = Document(source=str(path))
    document.errors.append(str(error))
    return document
