"""Memo lifecycle - archive old memos, drop empty ones, create a new one.

Directory structure:
    <memo_dir>/YYYYMMDDhhmmss.<ext>          (current memos)
    <memo_dir>/YYYY/MM/YYYYMMDDhhmmss.<ext>  (archived memos)

Key class: MemoArchiver (archive(), create_memo()).
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .classifier import classify, format_timestamp
from .errors import ClassifyError, MemoCreateError, MemoDirError

logger = logging.getLogger(__name__)


def archive_threshold(now: datetime) -> datetime:
    """Return ``now`` minus one calendar month.

    The day is clamped to the length of the target month, so
    2025-03-31 becomes 2025-02-28.
    """
    year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


@dataclass
class ArchiveReport:
    """Outcome of one archive() pass."""

    moved: list[tuple[Path, Path]] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.moved or self.deleted or self.failed)


class MemoArchiver:
    """Archive and create memos inside a single memo directory."""

    def __init__(self, memo_dir: Path, filter_ext: str | None = None) -> None:
        """
        Args:
            memo_dir: Resolved memo directory (must exist).
            filter_ext: If set, only memos with this extension are archived
                or deleted; others are left alone.
        """
        self.memo_dir = memo_dir
        self.filter_ext = filter_ext

    def archive(self, now: datetime | None = None) -> ArchiveReport:
        """Move memos older than one month into YYYY/MM/, delete empty ones.

        Per-file failures are logged and recorded in the report; the scan
        always continues with the next entry.

        Raises:
            MemoDirError: if the memo directory cannot be listed.
        """
        if now is None:
            now = datetime.now().astimezone()
        elif now.tzinfo is None:
            now = now.astimezone()
        threshold = archive_threshold(now)

        try:
            entries = sorted(self.memo_dir.iterdir())
        except OSError as e:
            raise MemoDirError(f"Failed to read directory {self.memo_dir}: {e}") from e

        report = ArchiveReport()
        for path in entries:
            if path.is_dir():
                continue
            self._process(path, threshold, report)

        if report:
            logger.info(
                "Archive pass: %d moved, %d deleted, %d failed (threshold: %s)",
                len(report.moved),
                len(report.deleted),
                len(report.failed),
                threshold.date().isoformat(),
            )
        return report

    def _process(self, path: Path, threshold: datetime, report: ArchiveReport) -> None:
        try:
            ts = classify(path.name)
        except ClassifyError as e:
            self._fail(path, e, report)
            return
        if ts is None:
            return
        if self.filter_ext is not None and ts.ext != self.filter_ext:
            return

        try:
            size = path.stat().st_size
        except OSError as e:
            self._fail(path, f"failed to check file size: {e}", report)
            return

        # Empty memos are dropped regardless of age, never moved
        if size == 0:
            try:
                path.unlink()
            except OSError as e:
                self._fail(path, f"failed to delete empty file: {e}", report)
                return
            report.deleted.append(path)
            logger.info("Deleted empty file: %s", path)
            return

        try:
            file_date = ts.date()
        except ClassifyError as e:
            self._fail(path, e, report)
            return
        if file_date >= threshold:
            return

        dest_dir = self.memo_dir / ts.archive_subdir
        dest = dest_dir / path.name
        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self._fail(path, f"failed to create directory {dest_dir}: {e}", report)
            return
        if dest.exists():
            self._fail(path, f"destination already exists: {dest}", report)
            return
        try:
            path.rename(dest)
        except OSError as e:
            self._fail(path, f"failed to move to {dest}: {e}", report)
            return
        report.moved.append((path, dest))
        logger.info("Moved: %s -> %s", path, dest)

    @staticmethod
    def _fail(path: Path, reason: object, report: ArchiveReport) -> None:
        report.failed.append((path, str(reason)))
        logger.warning("Skipping %s: %s", path, reason)

    def memo_path(self, ext: str, now: datetime | None = None) -> Path:
        """Path of the memo that create_memo() would create at ``now``."""
        if now is None:
            now = datetime.now()
        return self.memo_dir / f"{format_timestamp(now)}.{ext}"

    def create_memo(self, ext: str, now: datetime | None = None) -> Path:
        """Create an empty memo named after the current local time.

        An existing memo with the same name (same second) is kept intact.

        Raises:
            MemoCreateError: if the file cannot be created.
        """
        path = self.memo_path(ext, now)
        if path.exists():
            logger.warning("Memo already exists, keeping its content: %s", path)
        try:
            with path.open("a", encoding="utf-8"):
                pass
        except OSError as e:
            raise MemoCreateError(f"Failed to create file {path}: {e}") from e
        logger.debug("Created memo: %s", path)
        return path
