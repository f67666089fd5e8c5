"""Application entry point - parse flags, archive old memos, create a new one.

One run:
  1. Load settings (.env + settings.toml) and apply --path / --ext.
  2. Resolve (and create) the memo directory.
  3. Archive memos older than one month, delete empty ones.
  4. Create a fresh empty memo and print its path.

Fatal errors print ``Error: ...`` to stderr and exit with status 1;
per-memo failures during archival are only logged.
"""

import argparse
import logging
import sys
from dataclasses import replace

from .archiver import MemoArchiver
from .paths import resolve_memo_dir
from .settings import load_settings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="memoarchiver",
        description="Archive old timestamp-named memos and create a new one.",
    )
    parser.add_argument("--path", help="memo directory path (default: ~/memo)")
    parser.add_argument(
        "--ext", help="file extension for the new memo (default: md)"
    )
    return parser.parse_args(argv)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    logging.getLogger("memoarchiver").setLevel(
        logging.getLevelName(level.upper())
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = _parse_args(argv)

    try:
        settings = load_settings()
        overrides = {}
        if args.path is not None:
            overrides["path"] = args.path
        if args.ext is not None:
            overrides["ext"] = args.ext
        if overrides:
            settings = replace(settings, **overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Check your settings.toml configuration.", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _setup_logging(settings.log_level)

    try:
        memo_dir = resolve_memo_dir(settings.path, settings.path_mode)
        archiver = MemoArchiver(
            memo_dir, filter_ext=settings.ext if settings.filter_ext else None
        )
        archiver.archive()
        path = archiver.create_memo(settings.ext)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Created: {path}")


if __name__ == "__main__":
    main()
