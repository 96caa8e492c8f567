"""Re-express a parsed document as generic structured data."""

from __future__ import annotations

import json
import re
from typing import Any

from omegaconf import DictConfig, OmegaConf

from lightyaml.errors import TypeMismatchError, ValueLookupError
from lightyaml.values import Document, Value, ValueType

_INDEX_RE = re.compile(r"[0-9]+")


def _empty_container(value: Value) -> list[Any] | dict[str, Any]:
    return [] if value.type is ValueType.ARRAY else {}


def to_builtin(node: Value | Document) -> Any:
    """Convert a value (or a whole document) to dicts, lists and scalars.

    Absent values become ``None``. The walk uses an explicit stack, so the
    depth of the tree is not bounded by the interpreter recursion limit.
    """
    root = node.root if isinstance(node, Document) else node
    if not root.is_container:
        return root.extract(root.type)

    result = _empty_container(root)
    stack: list[tuple[Value, Any]] = [(root, result)]
    while stack:
        value, target = stack.pop()
        if value.type is ValueType.OBJECT:
            entries = value.items()
        else:
            entries = list(enumerate(value.children()))
        for key, child in entries:
            if child.is_container:
                converted = _empty_container(child)
                stack.append((child, converted))
            else:
                converted = child.extract(child.type)
            if isinstance(target, list):
                target.append(converted)
            else:
                target[key] = converted
    return result


def to_json(node: Value | Document, indent: int | None = 2) -> str:
    """Serialise a value or document to a JSON string, keeping key order."""
    return json.dumps(to_builtin(node), indent=indent, ensure_ascii=False)


def to_omegaconf(document: Document) -> DictConfig:
    """Wrap a document in an OmegaConf config for dotted-path access."""
    return OmegaConf.create(to_builtin(document))


def select(node: Value | Document, path: str, default: Any = None) -> Any:
    """Resolve a dotted path such as ``server.ports.0`` to builtin data.

    Segments index mappings by key and sequences by integer position. Text is
    returned verbatim, ``???`` and ``${...}`` included. ``default`` is
    returned when any segment does not resolve.
    """
    current = node.root if isinstance(node, Document) else node
    for segment in path.split("."):
        try:
            if current.type is ValueType.ARRAY:
                if not _INDEX_RE.fullmatch(segment):
                    return default
                current = current[int(segment)]
            else:
                current = current[segment]
        except (ValueLookupError, TypeMismatchError):
            return default
    return to_builtin(current)
