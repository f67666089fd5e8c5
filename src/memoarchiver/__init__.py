"""memoarchiver - keep a flat directory of timestamp-named memos tidy.

Each run archives memos older than one month into YYYY/MM/ subdirectories,
deletes empty memos, and creates a fresh empty memo stamped with the
current time.

Package entry point. Exports the version string only; the CLI lives in
main.py.
"""

__version__ = "0.1.0"
