"""Schema-less type inference for value text."""

from __future__ import annotations

import re

from lightyaml.values import Value

_INTEGER_RE = re.compile(r"-?[0-9]+")
# Exactly one dot: "127.0.0.1" and "1.2.3" stay text.
_FLOAT_RE = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+)")

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


def is_array_text(text: str) -> bool:
    return len(text) >= 2 and text[0] == "[" and text[-1] == "]"


def split_array(text: str) -> list[str]:
    """Split ``[a,b,[c,d]]`` into its top-level elements ``a``, ``b``, ``[c,d]``.

    A running bracket depth is kept and ``,``/``]`` only separate elements at
    depth one or less, so commas inside nested arrays never split. Nested
    elements keep their brackets; empty elements are dropped.
    """
    elements: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char in ",]" and depth <= 1:
            # current starts with the separator (or bracket) that opened it
            element = "".join(current[1:])
            if element:
                if element.startswith("["):
                    element += "]"
                elements.append(element)
            current = []
        current.append(char)
    return elements


def classify(text: str) -> Value:
    """Infer the value held by ``text``; never raises.

    Precedence: empty -> absent, ``true``/``false`` -> boolean, bracketed ->
    sequence, ``-?digits`` -> integer, a single dot among digits -> float,
    anything else -> verbatim text. Nested arrays are built with an explicit
    work stack, so bracket depth is not bounded by the recursion limit.
    """
    if not is_array_text(text):
        return _classify_scalar(text)

    root = Value.sequence()
    stack: list[tuple[Value, list[str]]] = [(root, split_array(text))]
    while stack:
        sequence, elements = stack.pop()
        for element in elements:
            if is_array_text(element):
                child = Value.sequence()
                stack.append((child, split_array(element)))
            else:
                child = _classify_scalar(element)
            sequence.append(child)
    return root


def _classify_scalar(text: str) -> Value:
    if not text:
        return Value.absent()
    if text in (TRUE_LITERAL, FALSE_LITERAL):
        return Value.boolean(text == TRUE_LITERAL)
    if _INTEGER_RE.fullmatch(text):
        return Value.integer(int(text))
    if _FLOAT_RE.fullmatch(text):
        return Value.floating(float(text))
    return Value.text(text)
