"""Settings - reads .env + settings.toml to produce MemoSettings.

Resolution order for every key: CLI flag (applied by main.py) >
environment variable > settings.toml ``[memo]`` table > built-in default.

Key entities:
  - MemoSettings: frozen dataclass with the resolved configuration.
  - config_dir(): where .env and settings.toml live.
  - load_settings(): parse .env + settings.toml -> MemoSettings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .paths import PATH_MODES, home_dir

logger = logging.getLogger(__name__)

DEFAULT_PATH = "~/memo"
DEFAULT_EXT = "md"

# settings.toml key -> environment variable
_ENV_KEYS = {
    "path": "MEMOARCHIVER_PATH",
    "ext": "MEMOARCHIVER_EXT",
    "path_mode": "MEMOARCHIVER_PATH_MODE",
    "log_level": "MEMOARCHIVER_LOG_LEVEL",
}


@dataclass(frozen=True)
class MemoSettings:
    """Resolved configuration for one run."""

    path: str = DEFAULT_PATH
    ext: str = DEFAULT_EXT
    path_mode: str = "auto"  # "auto" | "home" | "cwd"
    filter_ext: bool = False  # only archive/delete memos with `ext`
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.path_mode not in PATH_MODES:
            raise ValueError(
                f"Invalid path_mode {self.path_mode!r} "
                f"(expected one of {', '.join(PATH_MODES)})"
            )
        if not self.ext or not self.ext.replace("_", "").isalnum():
            raise ValueError(f"Invalid extension {self.ext!r}")
        if not self.path:
            raise ValueError("Memo path must not be empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Invalid log_level {self.log_level!r}")


def config_dir() -> Path:
    """Return the config directory ($MEMOARCHIVER_DIR or ~/.memoarchiver).

    Raises:
        MemoDirError: if the home directory cannot be determined.
    """
    custom = os.environ.get("MEMOARCHIVER_DIR")
    if custom:
        return Path(custom).expanduser()
    return home_dir() / ".memoarchiver"


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_settings(directory: Path | None = None) -> MemoSettings:
    """Read .env + settings.toml and return MemoSettings.

    Both files are optional; missing keys fall back to defaults.

    Args:
        directory: Override for the config directory. Defaults to config_dir().

    Raises:
        ValueError: settings.toml is malformed or holds an invalid value.
    """
    if directory is None:
        directory = config_dir()

    # Load .env files (local cwd first, then config dir)
    local_env = Path(".env")
    global_env = directory / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    section: dict = {}
    toml_path = directory / "settings.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid settings file {toml_path}: {e}") from e
        section = raw.get("memo", {})
        if not isinstance(section, dict):
            raise ValueError(f"{toml_path}: [memo] must be a table")
        logger.debug("Loaded settings from %s", toml_path)

    def _get(key: str, default):
        """Environment > settings.toml > default."""
        env_name = _ENV_KEYS.get(key)
        if env_name:
            value = os.getenv(env_name)
            if value:
                return value
        return section.get(key, default)

    return MemoSettings(
        path=str(_get("path", DEFAULT_PATH)),
        ext=str(_get("ext", DEFAULT_EXT)),
        path_mode=str(_get("path_mode", "auto")),
        filter_ext=_parse_bool(section.get("filter_ext", False)),
        log_level=str(_get("log_level", "INFO")).upper(),
    )
