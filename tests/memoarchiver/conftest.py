"""Shared fixtures for memoarchiver tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def memo_dir(tmp_path: Path) -> Path:
    d = tmp_path / "memo"
    d.mkdir()
    return d


@pytest.fixture
def make_memo(memo_dir: Path) -> Callable[..., Path]:
    """Write a memo file directly under memo_dir. Empty content -> 0 bytes."""

    def _make(name: str, content: str = "note") -> Path:
        path = memo_dir / name
        path.write_text(content)
        return path

    return _make
