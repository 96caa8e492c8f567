"""Tagged values and the document tree produced by the parser."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from lightyaml.errors import TypeMismatchError, ValueLookupError


class ValueType(Enum):
    """Tag carried by every node of a parsed document."""

    NONE = "none"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    ARRAY = "array"
    OBJECT = "object"


_PYTHON_TYPES: dict[type, ValueType] = {
    type(None): ValueType.NONE,
    int: ValueType.INT,
    float: ValueType.FLOAT,
    str: ValueType.STRING,
    bool: ValueType.BOOL,
    list: ValueType.ARRAY,
    dict: ValueType.OBJECT,
}

# Widening conversions accepted by extract(); everything else must match exactly.
_COMPATIBLE: dict[ValueType, frozenset[ValueType]] = {
    ValueType.INT: frozenset({ValueType.INT, ValueType.FLOAT}),
}

_CONTAINERS = frozenset({ValueType.ARRAY, ValueType.OBJECT})


def _resolve_type(expected: ValueType | type) -> ValueType:
    if isinstance(expected, ValueType):
        return expected
    try:
        return _PYTHON_TYPES[expected]
    except KeyError as exc:
        raise TypeError(f"Unsupported extraction target {expected!r}") from exc


class Value:
    """A single node: a tag plus the payload that tag allows.

    Sequences own a ``list`` of child values and mappings own an
    insertion-ordered ``dict`` of them. The payload is never exposed directly;
    use :meth:`extract`, indexing or iteration, all of which check the tag.
    """

    __slots__ = ("type", "_payload", "__weakref__")

    def __init__(self, value_type: ValueType = ValueType.NONE, payload: Any = None) -> None:
        self.type = value_type
        self._payload = payload

    # -- Constructors ---------------------------------------------------

    @classmethod
    def absent(cls) -> Value:
        return cls(ValueType.NONE, None)

    @classmethod
    def integer(cls, number: int) -> Value:
        return cls(ValueType.INT, int(number))

    @classmethod
    def floating(cls, number: float) -> Value:
        return cls(ValueType.FLOAT, float(number))

    @classmethod
    def text(cls, string: str) -> Value:
        return cls(ValueType.STRING, str(string))

    @classmethod
    def boolean(cls, flag: bool) -> Value:
        return cls(ValueType.BOOL, bool(flag))

    @classmethod
    def sequence(cls, items: Iterable[Value] = ()) -> Value:
        return cls(ValueType.ARRAY, list(items))

    @classmethod
    def mapping(cls, entries: Iterable[tuple[str, Value]] = ()) -> Value:
        return cls(ValueType.OBJECT, dict(entries))

    # -- Predicates -----------------------------------------------------

    @property
    def is_absent(self) -> bool:
        return self.type is ValueType.NONE

    @property
    def is_container(self) -> bool:
        return self.type in _CONTAINERS

    # -- Typed extraction -----------------------------------------------

    def extract(self, expected: ValueType | type) -> Any:
        """Return the payload as ``expected``, raising TypeMismatchError otherwise.

        ``expected`` is a :class:`ValueType` or one of ``int``, ``float``,
        ``str``, ``bool``, ``list``, ``dict`` and ``type(None)``. An integer may
        be extracted as a float; no other conversion is performed. Containers
        are returned as shallow copies so the tree keeps sole ownership of its
        children.
        """
        target = _resolve_type(expected)
        if target not in _COMPATIBLE.get(self.type, frozenset({self.type})):
            raise TypeMismatchError(self.type.value, target.value)
        if target is ValueType.FLOAT:
            return float(self._payload)
        if target is ValueType.ARRAY:
            return list(self._payload)
        if target is ValueType.OBJECT:
            return dict(self._payload)
        return self._payload

    # -- Container access -----------------------------------------------

    def _require(self, value_type: ValueType, operation: str) -> Any:
        if self.type is not value_type:
            raise TypeMismatchError(self.type.value, value_type.value, operation)
        return self._payload

    def _require_container(self, operation: str) -> Any:
        if self.type not in _CONTAINERS:
            raise TypeMismatchError(self.type.value, "array or object", operation)
        return self._payload

    def size(self) -> int:
        """Number of children of a sequence or mapping."""
        return len(self._require_container("measure"))

    def __getitem__(self, index: str | int) -> Value:
        # bool is an int subclass; True/False are not positions
        if isinstance(index, bool) or not isinstance(index, (str, int)):
            raise TypeError(
                f"Value indices must be str keys or int positions, not {type(index).__name__}"
            )
        if isinstance(index, str):
            entries = self._require(ValueType.OBJECT, "index by key")
            try:
                return entries[index]
            except KeyError as exc:
                raise ValueLookupError(index, len(entries)) from exc
        items = self._require(ValueType.ARRAY, "index by position")
        if not 0 <= index < len(items):
            raise ValueLookupError(index, len(items))
        return items[index]

    def __setitem__(self, key: str, value: Value) -> None:
        # Re-inserting an existing key keeps its position; the last write wins.
        self._require(ValueType.OBJECT, "assign into")[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._require(ValueType.OBJECT, "look up")

    def __iter__(self) -> Iterator[Any]:
        """Iterate keys of a mapping or items of a sequence."""
        return iter(list(self._require_container("iterate")))

    def append(self, value: Value) -> None:
        self._require(ValueType.ARRAY, "append to").append(value)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self._require(ValueType.OBJECT, "look up").get(key, default)

    def keys(self) -> list[str]:
        return list(self._require(ValueType.OBJECT, "list keys of"))

    def items(self) -> list[tuple[str, Value]]:
        return list(self._require(ValueType.OBJECT, "list entries of").items())

    def children(self) -> list[Value]:
        """Direct children in document order; empty for scalars."""
        if self.type is ValueType.ARRAY:
            return list(self._payload)
        if self.type is ValueType.OBJECT:
            return list(self._payload.values())
        return []

    # -- Comparison and display -----------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.type is other.type and self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.type is ValueType.NONE:
            return "Value(none)"
        return f"Value({self.type.value}, {self._payload!r})"


class Document:
    """Root mapping produced by one parse of an input source."""

    def __init__(self, root: Value | None = None, source: str = "<string>") -> None:
        self.root = root if root is not None else Value.mapping()
        self.source = source
        self.errors: list[str] = []
        self.released = False

    # -- Convenience accessors ------------------------------------------

    def __len__(self) -> int:
        return self.root.size()

    def size(self) -> int:
        return self.root.size()

    def __getitem__(self, key: str) -> Value:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self.root.get(key, default)

    def keys(self) -> list[str]:
        return self.root.keys()

    def items(self) -> list[tuple[str, Value]]:
        return self.root.items()

    def __repr__(self) -> str:
        return f"Document(source={self.source!r}, keys={self.keys()!r})"

    # -- Traversal and teardown -----------------------------------------

    def walk(self) -> Iterator[Value]:
        """Yield every reachable node depth-first, parents before children."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def release(self) -> int:
        """Tear the tree down depth-first and return the number of nodes released.

        Uses an explicit work stack so arbitrarily deep documents are released
        without recursion. Every reachable node is visited exactly once; the
        document is left holding a fresh empty root.
        """
        released = 0
        stack = [self.root]
        self.root = Value.mapping()
        while stack:
            node = stack.pop()
            stack.extend(node.children())
            node._payload = None
            node.type = ValueType.NONE
            released += 1
        self.released = True
        return released

    def __enter__(self) -> Document:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
