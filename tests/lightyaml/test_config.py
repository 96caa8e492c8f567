from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from lightyaml.config import TAB_WIDTH_ENV, ParserOptions, load_options
from lightyaml.errors import SourceUnavailableError


def test_defaults() -> None:
    options = ParserOptions()
    assert options.indentation.tab_width == 4
    assert options.indentation.mode == "lenient"
    assert options.comments.quote_aware is False
    assert options.source.encoding == "utf-8"
    assert options.source.raise_on_missing is False


def test_tab_width_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TAB_WIDTH_ENV, "2")
    assert ParserOptions().indentation.tab_width == 2


def test_load_options_from_file(write_yaml: Callable[..., Path]) -> None:
    path = write_yaml(
        "indentation:\n  mode: strict\n  tab_width: 8\ncomments:\n  quote_aware: true\n",
        name="options.yaml",
    )
    options = load_options(config_path=path)
    assert options.indentation.mode == "strict"
    assert options.indentation.tab_width == 8
    assert options.comments.quote_aware is True
    assert options.source.encoding == "utf-8"


def test_overrides_apply_after_file(write_yaml: Callable[..., Path]) -> None:
    path = write_yaml("indentation:\n  tab_width: 8\n", name="options.yaml")
    options = load_options(
        config_path=path,
        overrides={"indentation.tab_width": 2, "indentation.mode": None, "source.encoding": "latin-1"},
    )
    assert options.indentation.tab_width == 2
    assert options.indentation.mode == "lenient"
    assert options.source.encoding == "latin-1"


@pytest.mark.parametrize(
    "overrides",
    [
        {"indentation.tab_width": 0},
        {"indentation.mode": "loose"},
        {"source.encoding": "no-such-codec"},
    ],
)
def test_invalid_options_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        load_options(overrides=overrides)


def test_missing_option_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        load_options(config_path=tmp_path / "nope.yaml")


def test_non_numeric_tab_width_in_environment_falls_back(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv(TAB_WIDTH_ENV, "wide")
    with caplog.at_level(logging.WARNING, logger="lightyaml.config"):
        options = ParserOptions()
    assert options.indentation.tab_width == 4
    assert TAB_WIDTH_ENV in caplog.text
