from __future__ import annotations

import pytest

from lightyaml.classifier import classify, split_array
from lightyaml.values import Value, ValueType


def test_empty_text_is_absent() -> None:
    assert classify("").is_absent


@pytest.mark.parametrize(
    ("text", "expected"),
    [("true", True), ("false", False)],
)
def test_exact_boolean_literals(text: str, expected: bool) -> None:
    value = classify(text)
    assert value.type is ValueType.BOOL
    assert value.extract(bool) is expected


@pytest.mark.parametrize("text", ["True", "TRUE", "False", "yes", "no"])
def test_other_boolean_spellings_stay_text(text: str) -> None:
    assert classify(text) == Value.text(text)


def test_integers() -> None:
    assert classify("42") == Value.integer(42)
    assert classify("-7") == Value.integer(-7)
    assert classify("007").extract(int) == 7


def test_floats_need_exactly_one_dot() -> None:
    assert classify("3.14") == Value.floating(3.14)
    assert classify("-0.5") == Value.floating(-0.5)
    assert classify("1.") == Value.floating(1.0)
    assert classify("1.2.3.4") == Value.text("1.2.3.4")
    assert classify("127.0.0.1").type is ValueType.STRING


@pytest.mark.parametrize("text", ["-", ".", "1e5", "0x1F", "12abc", "hello"])
def test_non_numeric_text(text: str) -> None:
    assert classify(text) == Value.text(text)


def test_text_is_verbatim() -> None:
    assert classify('"quoted"').extract(str) == '"quoted"'


def test_split_array_respects_nesting() -> None:
    assert split_array("[1,2,[3,4],five]") == ["1", "2", "[3,4]", "five"]
    assert split_array("[[1,[2,3]],4]") == ["[1,[2,3]]", "4"]


def test_split_array_drops_empty_elements() -> None:
    assert split_array("[1,2,]") == ["1", "2"]
    assert split_array("[]") == []


def test_nested_array_classification() -> None:
    value = classify("[1,2,[3,4],five]")
    assert value == Value.sequence(
        [
            Value.integer(1),
            Value.integer(2),
            Value.sequence([Value.integer(3), Value.integer(4)]),
            Value.text("five"),
        ],
    )


def test_array_elements_are_reclassified() -> None:
    value = classify("[true,1.5,[[]],x.y.z]")
    assert [item.type for item in value] == [
        ValueType.BOOL,
        ValueType.FLOAT,
        ValueType.ARRAY,
        ValueType.STRING,
    ]
    assert value[2][0].size() == 0


def test_unbalanced_brackets_stay_text() -> None:
    assert classify("[1,2").type is ValueType.STRING


def test_deep_array_nesting_is_not_bounded_by_recursion() -> None:
    value = classify("[" * 600 + "7" + "]" * 600)
    depth = 0
    while value.type is ValueType.ARRAY:
        assert value.size() == 1
        value = value[0]
        depth += 1
    assert depth == 600
    assert value == Value.integer(7)
