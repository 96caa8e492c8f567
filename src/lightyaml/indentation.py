"""Leading-whitespace measurement and indentation depth rules."""

from __future__ import annotations

from typing import Literal

from lightyaml.errors import IrregularIndentationError

DEFAULT_TAB_WIDTH = 4

IndentationMode = Literal["lenient", "strict"]


def count_leading_columns(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Return the indentation width of ``line``: spaces count 1, tabs ``tab_width``."""
    columns = 0
    for char in line:
        if char == " ":
            columns += 1
        elif char == "\t":
            columns += tab_width
        else:
            break
    return columns


def check_alignment(
    columns: int,
    unit: int,
    line_number: int,
    mode: IndentationMode = "lenient",
) -> None:
    """Reject indentation that is not a multiple of ``unit`` when ``mode`` is strict."""
    if mode == "strict" and unit and columns % unit:
        raise IrregularIndentationError(line_number, columns, unit)


def logical_depth(columns: int, unit: int) -> int:
    """Nesting depth for ``columns``; truncating division, zero when nothing is indented."""
    if unit <= 0:
        return 0
    return columns // unit


def pop_count(previous: int, current: int, unit: int) -> int:
    """Number of scopes to close when indentation drops from ``previous`` to ``current``."""
    if current >= previous or unit <= 0:
        return 0
    return (previous - current) // unit
