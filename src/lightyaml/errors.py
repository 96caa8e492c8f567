"""Exception hierarchy shared by the lightyaml modules."""

from __future__ import annotations

from pathlib import Path


class LightYamlError(Exception):
    """Base class for every error raised by lightyaml."""


class TypeMismatchError(LightYamlError, TypeError):
    """Raised when a value is accessed as a shape other than its stored tag."""

    def __init__(self, stored: str, requested: str, operation: str = "extract") -> None:
        self.stored = stored
        self.requested = requested
        self.operation = operation
        super().__init__(
            f"Cannot {operation} a {stored} value as {requested}.",
        )


class ValueLookupError(LightYamlError, LookupError):
    """Raised when a mapping key or sequence position does not exist."""

    def __init__(self, index: str | int, size: int) -> None:
        self.index = index
        self.size = size
        if isinstance(index, int):
            message = f"Position {index} is out of range for a sequence of {size} values."
        else:
            message = f"Key '{index}' was not found among {size} mapping entries."
        super().__init__(message)


class SourceUnavailableError(LightYamlError, OSError):
    """Raised when the input source cannot be opened for reading."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not open {self.path}: {reason}")


class IrregularIndentationError(LightYamlError, ValueError):
    """Raised in strict mode when indentation is not a multiple of the document unit."""

    def __init__(self, line_number: int, columns: int, unit: int) -> None:
        self.line_number = line_number
        self.columns = columns
        self.unit = unit
        super().__init__(
            f"Line {line_number}: indentation of {columns} columns is not a multiple "
            f"of the document indentation unit ({unit}).",
        )
