"""Tests for paths.py - memo directory resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from memoarchiver.errors import MemoDirError
from memoarchiver.paths import expand_memo_path, resolve_memo_dir


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def in_cwd(tmp_path: Path, monkeypatch) -> Path:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class TestExpandAuto:
    def test_tilde_prefix(self, fake_home: Path):
        assert expand_memo_path("~/memo") == fake_home / "memo"

    def test_bare_tilde(self, fake_home: Path):
        assert expand_memo_path("~") == fake_home

    def test_absolute(self, tmp_path: Path, fake_home: Path):
        assert expand_memo_path(str(tmp_path / "abs")) == tmp_path / "abs"

    def test_relative_uses_cwd(self, fake_home: Path, in_cwd: Path):
        assert expand_memo_path("memo") == in_cwd / "memo"


class TestExpandHome:
    def test_bare_name_joins_home(self, fake_home: Path, in_cwd: Path):
        assert expand_memo_path("memo", mode="home") == fake_home / "memo"

    def test_tilde_prefix_tolerated(self, fake_home: Path):
        assert expand_memo_path("~/notes/memo", mode="home") == (
            fake_home / "notes" / "memo"
        )


class TestExpandCwd:
    def test_tilde_not_expanded(self, fake_home: Path, in_cwd: Path):
        assert expand_memo_path("~/memo", mode="cwd") == in_cwd / "~" / "memo"

    def test_relative(self, in_cwd: Path):
        assert expand_memo_path("a/b", mode="cwd") == in_cwd / "a" / "b"


class TestExpandErrors:
    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown path mode"):
            expand_memo_path("memo", mode="bogus")

    def test_home_lookup_failure(self):
        with patch(
            "memoarchiver.paths.Path.home",
            side_effect=RuntimeError("Could not determine home directory."),
        ):
            with pytest.raises(MemoDirError, match="home directory"):
                expand_memo_path("~/memo")


class TestResolveMemoDir:
    def test_creates_missing_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "memo"
        result = resolve_memo_dir(str(target))
        assert result == target
        assert target.is_dir()

    def test_existing_dir_untouched(self, tmp_path: Path):
        target = tmp_path / "memo"
        target.mkdir()
        (target / "keep.txt").write_text("x")
        assert resolve_memo_dir(str(target)) == target
        assert (target / "keep.txt").read_text() == "x"

    def test_file_in_the_way(self, tmp_path: Path):
        target = tmp_path / "memo"
        target.write_text("not a dir")
        with pytest.raises(MemoDirError, match="Failed to create directory"):
            resolve_memo_dir(str(target))

    def test_error_is_oserror(self, tmp_path: Path):
        target = tmp_path / "memo"
        target.write_text("not a dir")
        with pytest.raises(OSError):
            resolve_memo_dir(str(target))
