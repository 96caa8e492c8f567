"""Build the document tree from logical lines using an explicit scope stack."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lightyaml.classifier import classify
from lightyaml.indentation import (
    DEFAULT_TAB_WIDTH,
    IndentationMode,
    check_alignment,
    count_leading_columns,
    pop_count,
)
from lightyaml.normalizer import KEY_SEPARATOR, LogicalLine
from lightyaml.values import Document, Value

LOG = logging.getLogger(__name__)


def split_statement(text: str) -> tuple[str, str]:
    """Split a logical line on its first ``:`` into key and value text."""
    key, _, value_text = text.strip().partition(KEY_SEPARATOR)
    return key.rstrip(), value_text.strip()


def build_document(
    lines: Iterable[LogicalLine],
    indent_unit: int,
    tab_width: int = DEFAULT_TAB_WIDTH,
    mode: IndentationMode = "lenient",
    source: str = "<string>",
) -> Document:
    """Populate a new document from ``lines``.

    The scope stack holds the path of mappings from the root to the one being
    filled. A line ending in ``:`` opens a nested mapping and pushes it; a drop
    in indentation pops one scope per indentation unit. The root is never
    popped.
    """
    document = Document(source=source)
    scopes: list[Value] = [document.root]
    previous_indentation = 0

    for line in lines:
        depth = count_leading_columns(line.text, tab_width)
        check_alignment(depth, indent_unit, line.line_number, mode)

        pops = pop_count(previous_indentation, depth, indent_unit)
        if pops:
            available = len(scopes) - 1
            if pops > available:
                LOG.debug(
                    "Line %d closes %d scopes but only %d are open",
                    line.line_number,
                    pops,
                    available,
                )
                pops = available
            del scopes[len(scopes) - pops :]

        key, value_text = split_statement(line.text)
        value = classify(value_text)
        current = scopes[-1]
        if value.is_absent:
            child = Value.mapping()
            current[key] = child
            scopes.append(child)
            LOG.debug("Opened scope '%s' at depth %d (line %d)", key, len(scopes) - 1, line.line_number)
        else:
            current[key] = value

        previous_indentation = depth

    return document
