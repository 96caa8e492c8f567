from __future__ import annotations

import pytest

from lightyaml.errors import IrregularIndentationError
from lightyaml.indentation import check_alignment, count_leading_columns, logical_depth, pop_count


def test_count_leading_columns_spaces_and_tabs() -> None:
    assert count_leading_columns("key:1") == 0
    assert count_leading_columns("    key:1") == 4
    assert count_leading_columns("\tkey:1") == 4
    assert count_leading_columns("\t  key:1", tab_width=8) == 10


def test_logical_depth_truncates() -> None:
    assert logical_depth(4, 2) == 2
    assert logical_depth(5, 2) == 2
    assert logical_depth(3, 0) == 0


def test_pop_count_uses_truncated_division() -> None:
    assert pop_count(4, 0, 2) == 2
    assert pop_count(4, 2, 4) == 0
    assert pop_count(2, 4, 2) == 0
    assert pop_count(4, 0, 0) == 0


def test_check_alignment_only_rejects_in_strict_mode() -> None:
    check_alignment(3, 2, line_number=7)
    check_alignment(4, 2, line_number=7, mode="strict")
    with pytest.raises(IrregularIndentationError) as excinfo:
        check_alignment(3, 2, line_number=7, mode="strict")
    assert excinfo.value.line_number == 7
    assert "Line 7" in str(excinfo.value)
