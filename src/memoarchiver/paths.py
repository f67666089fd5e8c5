"""Memo directory resolution.

Turns a configured path string into an absolute directory, creating it if
needed. How the string is interpreted depends on the path mode:

  - auto: expand a leading ``~`` / ``~/``; absolute paths as-is; anything
    else relative to the current working directory.
  - home: always relative to the home directory (``memo`` -> ``~/memo``).
  - cwd:  never expand ``~``; relative paths resolve against the cwd.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import MemoDirError

logger = logging.getLogger(__name__)

PATH_MODES = ("auto", "home", "cwd")


def home_dir() -> Path:
    """Return the current user's home directory.

    Raises:
        MemoDirError: if the platform cannot determine it.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise MemoDirError(f"Failed to get home directory: {e}") from e


def _strip_home_prefix(path: str) -> str | None:
    """Return the remainder after a ``~`` or ``~/`` prefix, or None."""
    if path == "~":
        return ""
    if path.startswith("~/"):
        return path[2:]
    return None


def expand_memo_path(path: str, mode: str = "auto") -> Path:
    """Turn a configured path string into an absolute Path (no side effects)."""
    if mode not in PATH_MODES:
        raise ValueError(
            f"Unknown path mode {mode!r} (expected one of {', '.join(PATH_MODES)})"
        )

    if mode == "home":
        rest = _strip_home_prefix(path)
        return home_dir() / (path if rest is None else rest)

    if mode == "auto":
        rest = _strip_home_prefix(path)
        if rest is not None:
            return home_dir() / rest

    # cwd mode, or auto without a home prefix
    return Path(path).absolute()


def resolve_memo_dir(path: str, mode: str = "auto") -> Path:
    """Resolve the memo directory and create it (with parents) if absent.

    Raises:
        MemoDirError: home lookup or directory creation failed.
    """
    memo_dir = expand_memo_path(path, mode)
    try:
        memo_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MemoDirError(f"Failed to create directory {memo_dir}: {e}") from e
    logger.debug("Memo directory: %s", memo_dir)
    return memo_dir
