"""Turn raw physical lines into logical ``key:value`` lines."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from lightyaml.indentation import DEFAULT_TAB_WIDTH, count_leading_columns

LOG = logging.getLogger(__name__)

COMMENT_CHAR = "#"
KEY_SEPARATOR = ":"
COLLAPSE_AFTER = frozenset({":", ","})


@dataclass
class LogicalLine:
    """One ``key:value`` statement with any folded continuation text."""

    text: str
    line_number: int


@dataclass
class NormalizedSource:
    """Logical lines plus the indentation unit fixed by the first indented one."""

    lines: list[LogicalLine] = field(default_factory=list)
    indent_unit: int = 0


def strip_comment(line: str, quote_aware: bool = False) -> str:
    """Drop everything from the first ``#``.

    With ``quote_aware`` a ``#`` inside a single- or double-quoted run is kept.
    """
    if not quote_aware:
        return line.split(COMMENT_CHAR, 1)[0]
    quote: str | None = None
    for index, char in enumerate(line):
        if quote is not None:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == COMMENT_CHAR:
            return line[:index]
    return line


def collapse_whitespace(line: str) -> str:
    """Remove spaces that follow ``:`` or ``,`` (``name:   value`` -> ``name:value``).

    Leading indentation is untouched because no separator precedes it.
    """
    kept: list[str] = []
    last_char = ""
    for char in line:
        if char != " ":
            last_char = char
        elif last_char in COLLAPSE_AFTER:
            continue
        kept.append(char)
    return "".join(kept)


def normalize_lines(
    raw_lines: Iterable[str],
    tab_width: int = DEFAULT_TAB_WIDTH,
    quote_aware_comments: bool = False,
) -> NormalizedSource:
    """Strip comments and blanks, and fold colon-less lines into the previous line."""
    source = NormalizedSource()
    for line_number, raw in enumerate(raw_lines, start=1):
        line = strip_comment(raw.rstrip("\r\n"), quote_aware_comments)
        if not line.strip():
            continue

        if KEY_SEPARATOR in line:
            columns = count_leading_columns(line, tab_width)
            if columns and not source.indent_unit:
                source.indent_unit = columns
                LOG.debug("Indentation unit fixed at %d columns (line %d)", columns, line_number)
            source.lines.append(LogicalLine(collapse_whitespace(line.rstrip()), line_number))
            continue

        fragment = collapse_whitespace(line.strip(" \t"))
        if not source.lines:
            LOG.warning("Dropping continuation line %d with no preceding key: %r", line_number, fragment)
            continue
        source.lines[-1].text += fragment
    return source
