"""Timestamp filename classification.

A memo is named after the moment it was created:

    YYYYMMDDhhmmss.<ext>   (e.g. 20250217165636.md)

classify() parses such a name into a TimestampName; anything else is None
and must be left alone by callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from .errors import ClassifyError

# year, month, day, then hhmmss (unused), a dot and the extension
TIMESTAMP_RE = re.compile(r"(\d{4})(\d{2})(\d{2})\d{6}\.(\w+)", re.ASCII)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class TimestampName:
    """Date parts parsed from a timestamp filename."""

    name: str
    year: int
    month: int
    day: int
    ext: str  # without the leading dot

    @property
    def archive_subdir(self) -> str:
        """Relative archive directory, e.g. '2024/01'."""
        return f"{self.year:04d}/{self.month:02d}"

    def date(self) -> datetime:
        """Return the encoded date at 00:00:00 UTC.

        The time-of-day digits are ignored on purpose: archival works on
        whole days.

        Raises:
            ClassifyError: if the digits do not form a real calendar date.
        """
        try:
            return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)
        except ValueError as e:
            raise ClassifyError(f"Invalid date in {self.name!r}: {e}") from e


def classify(name: str) -> TimestampName | None:
    """Parse a filename against the timestamp pattern.

    >>> classify("20250217165636.md")
    TimestampName(name='20250217165636.md', year=2025, month=2, day=17, ext='md')
    >>> classify("notanote.txt") is None
    True

    Raises:
        ClassifyError: if a matched digit group cannot be converted.
    """
    m = TIMESTAMP_RE.fullmatch(name)
    if m is None:
        return None
    year, month, day, ext = m.groups()
    try:
        return TimestampName(
            name=name, year=int(year), month=int(month), day=int(day), ext=ext
        )
    except ValueError as e:
        raise ClassifyError(f"Failed to parse date digits in {name!r}: {e}") from e


def format_timestamp(moment: datetime) -> str:
    """Format a moment as a memo timestamp (YYYYMMDDhhmmss)."""
    return moment.strftime(TIMESTAMP_FORMAT)
