from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC_STR = str(ROOT / "src")
if SRC_STR not in sys.path:
    sys.path.insert(0, SRC_STR)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to a file under ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "data.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
