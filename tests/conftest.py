"""Shared pytest fixtures and test helpers for zenn2qiita tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from ruamel.yaml import YAML

FIXED_NOW = datetime(2023, 1, 1, tzinfo=UTC)
FIXED_TIMESTAMP = "2023-01-01T00:00:00.000Z"

ZENN_ARTICLE = (
    "---\n"
    'emoji: "🚀"\n'
    'title: "Test Title"\n'
    'type: "tech"\n'
    "published: true\n"
    "topics:\n"
    '  - "javascript"\n'
    '  - "typescript"\n'
    "---\n"
    "# Hello\n"
)


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and package logger state changed by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("zenn2qiita")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock frozen at :data:`FIXED_NOW`."""
    return lambda: FIXED_NOW


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a markdown file under ``tmp_path`` and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def split_output(text: str) -> tuple[dict[str, Any], str]:
    """Split converted text into ``(frontmatter, body)`` independently of the parser.

    Mirrors how a downstream consumer would read the file: the first two
    ``---`` lines delimit the block, loaded with a plain safe loader.
    """
    assert text.startswith("---\n"), text
    block, sep, body = text[len("---\n") :].partition("---\n")
    assert sep, text
    data = YAML(typ="safe").load(block) or {}
    return data, body
