from __future__ import annotations

from lightyaml.normalizer import collapse_whitespace, normalize_lines, strip_comment


def test_strip_comment_removes_trailing_note() -> None:
    assert strip_comment("key: 1 # note") == "key: 1 "


def test_strip_comment_ignores_quotes_by_default() -> None:
    assert strip_comment('title: "issue #4"') == 'title: "issue '


def test_strip_comment_quote_aware_keeps_quoted_hash() -> None:
    assert strip_comment('title: "issue #4" # trailing', quote_aware=True) == 'title: "issue #4" '
    assert strip_comment("tag: '#main'", quote_aware=True) == "tag: '#main'"


def test_collapse_whitespace_after_separators() -> None:
    assert collapse_whitespace("name:   value") == "name:value"
    assert collapse_whitespace("  list: [1, 2,   3]") == "  list:[1,2,3]"
    assert collapse_whitespace("name: John Smith") == "name:John Smith"


def test_normalize_lines_skips_blank_and_comment_lines() -> None:
    source = normalize_lines(["# header", "", "a: 1", "   ", "b: 2  # why"])
    assert [line.text for line in source.lines] == ["a:1", "b:2"]
    assert [line.line_number for line in source.lines] == [3, 5]
    assert source.indent_unit == 0


def test_normalize_lines_folds_continuation_lines() -> None:
    source = normalize_lines(["b:", "  c: [1,", "     2,", "     3]"])
    assert [line.text for line in source.lines] == ["b:", "  c:[1,2,3]"]


def test_indent_unit_fixed_by_first_indented_line() -> None:
    source = normalize_lines(["a:", "   b:", "      c: 1", "  d: 2"])
    assert source.indent_unit == 3


def test_indent_unit_counts_tabs() -> None:
    assert normalize_lines(["a:", "\tb: 1"]).indent_unit == 4
    assert normalize_lines(["a:", "\tb: 1"], tab_width=2).indent_unit == 2


def test_leading_continuation_is_dropped() -> None:
    source = normalize_lines(["orphan text", "a: 1"])
    assert [line.text for line in source.lines] == ["a:1"]


def test_line_endings_are_stripped() -> None:
    source = normalize_lines(["a: 1\r\n", "b: 2\n"])
    assert [line.text for line in source.lines] == ["a:1", "b:2"]
