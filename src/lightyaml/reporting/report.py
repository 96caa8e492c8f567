"""Document presentation utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from lightyaml.convert import to_json
from lightyaml.values import Document, Value, ValueType

LOG = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "tree")


def emit_document(
    document: Document,
    fmt: str = "json",
    output_path: Path | None = None,
    console: Console | None = None,
) -> None:
    """Format and emit a document as JSON or as a rich tree."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'; expected one of {', '.join(OUTPUT_FORMATS)}")

    if fmt == "json":
        rendered = to_json(document)
        if output_path:
            _write_text(output_path, rendered + "\n")
        else:
            sys.stdout.write(rendered + "\n")
        return

    tree = build_tree(document)
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as handle:
            Console(file=handle, width=120, color_system=None).print(tree)
        LOG.info("Wrote tree view to %s", output_path)
    else:
        (console or Console()).print(tree)


def build_tree(document: Document) -> Tree:
    """Build a rich tree labelling each node with its key and type."""
    tree = Tree(Text(document.source, style="bold cyan"))
    stack: list[tuple[Tree, Value]] = [(tree, document.root)]
    while stack:
        branch, value = stack.pop()
        if value.type is ValueType.OBJECT:
            entries = [(key, child) for key, child in value.items()]
        else:
            entries = [(f"[{index}]", child) for index, child in enumerate(value.children())]
        for key, child in entries:
            node = branch.add(_label(key, child))
            if child.is_container:
                stack.append((node, child))
    return tree


def _label(key: str, value: Value) -> Text:
    label = Text(key, style="bold")
    if value.is_container:
        noun = "entries" if value.type is ValueType.OBJECT else "items"
        label.append(f" ({value.type.value}, {value.size()} {noun})", style="dim")
        return label
    label.append(": ")
    label.append(_format_scalar(value))
    label.append(f"  {value.type.value}", style="dim")
    return label


def _format_scalar(value: Value) -> str:
    payload = value.extract(value.type)
    if value.type is ValueType.BOOL:
        return "true" if payload else "false"
    if payload is None:
        return "null"
    return str(payload)


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    LOG.info("Wrote %s", path)
