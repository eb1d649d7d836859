"""JSON-backed store of daily reports."""

import bisect
import json
import logging
import os
import tempfile
import threading
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from pydantic import ValidationError

from marche_covid.core.dates import DayLike, to_day
from marche_covid.core.errors import DuplicateReport, PersistenceFailure, ReportNotFound
from marche_covid.models.report import DailyReport

logger = logging.getLogger(__name__)


class ReportSeries:
    """
    Immutable, date-ordered view of the store.

    Readers work on one of these so a whole computation sees a single
    consistent state even if a write lands meanwhile.
    """

    def __init__(self, reports: Iterable[DailyReport] = ()):
        self.reports = tuple(reports)
        self._index: Dict[date, DailyReport] = {r.day: r for r in self.reports}

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self) -> Iterator[DailyReport]:
        return iter(self.reports)

    def __getitem__(self, item):
        return self.reports[item]

    def get(self, day: date) -> Optional[DailyReport]:
        """O(1) lookup by calendar day."""
        return self._index.get(day)

    def latest(self) -> Optional[DailyReport]:
        """Report with the latest date (the last one, the series being sorted)."""
        return self.reports[-1] if self.reports else None


def _alias_patch(patch: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite model field names in a patch to their dataset keys."""
    aliases = {name: field.alias for name, field in DailyReport.model_fields.items() if field.alias}
    return {aliases.get(key, key): value for key, value in patch.items()}


class ReportStore:
    """
    Ordered, day-unique collection of daily reports persisted as one JSON document.

    Every mutation builds the new sequence, rewrites the whole file through a
    temporary file and os.replace, and only then swaps the in-memory series.
    When path is None the store lives in memory only.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, reports: Iterable[DailyReport] = ()):
        self.path = Path(path) if path is not None else None
        self._lock = threading.RLock()
        self._series = ReportSeries(self._normalize(reports))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ReportStore":
        """Load the store from a JSON document; a missing file gives an empty store."""
        path = Path(path)
        if not path.exists():
            logger.warning(f"Data file {path} not found, starting with an empty store")
            return cls(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading data file {path}: {e}")
            raise PersistenceFailure(f"Could not read {path}: {e}") from e
        if not isinstance(raw, list):
            raise PersistenceFailure(f"Could not read {path}: expected a JSON array")
        try:
            reports = [DailyReport.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error(f"Invalid report in data file {path}: {e}")
            raise PersistenceFailure(f"Could not read {path}: {e}") from e
        store = cls(path, reports)
        logger.info(f"Loaded {len(store)} daily reports from {path}")
        return store

    @staticmethod
    def _normalize(reports: Iterable[DailyReport]) -> List[DailyReport]:
        """Sort by day, keeping the first report seen for each day."""
        seen = set()
        unique = []
        for report in reports:
            if report.day in seen:
                logger.warning(f"Dropping duplicate report for {report.day}")
                continue
            seen.add(report.day)
            unique.append(report)
        return sorted(unique, key=lambda r: r.day)

    def __len__(self) -> int:
        return len(self._series)

    def snapshot(self) -> ReportSeries:
        """Current immutable series."""
        return self._series

    def all(self) -> List[DailyReport]:
        return list(self._series)

    def find_exact(self, day: DayLike) -> DailyReport:
        """Report for one calendar day."""
        day = to_day(day)
        report = self._series.get(day)
        if report is None:
            raise ReportNotFound(day)
        return report

    def latest(self) -> DailyReport:
        """Most recent report."""
        report = self._series.latest()
        if report is None:
            raise ReportNotFound()
        return report

    def create(self, report: DailyReport) -> DailyReport:
        """Insert a report at its chronological position."""
        with self._lock:
            current = self._series
            if current.get(report.day) is not None:
                raise DuplicateReport(report.day)
            reports = list(current)
            days = [r.day for r in reports]
            reports.insert(bisect.bisect_left(days, report.day), report)
            self._commit(reports)
        logger.info(f"Created report for {report.day}")
        return report

    def create_many(self, reports: Iterable[DailyReport]) -> List[DailyReport]:
        """
        Insert every report whose day is free, with a single write.

        Returns the reports actually added; days already stored, or repeated
        within reports, are skipped.
        """
        with self._lock:
            current = self._series
            added = []
            taken = {r.day for r in current}
            for report in reports:
                if report.day in taken:
                    logger.info(f"Report for {report.day} already exists, skipping")
                    continue
                taken.add(report.day)
                added.append(report)
            if added:
                self._commit(sorted([*current, *added], key=lambda r: r.day))
        logger.info(f"Created {len(added)} reports")
        return added

    def update(self, day: DayLike, patch: Dict[str, Any]) -> DailyReport:
        """
        Merge patch into the report for day.

        A patch that moves the report to another day re-positions it, and
        fails with DuplicateReport if that day is already taken.
        """
        day = to_day(day)
        with self._lock:
            current = self._series
            existing = current.get(day)
            if existing is None:
                raise ReportNotFound(day)
            merged = DailyReport.model_validate({**existing.to_record(), **_alias_patch(patch)})
            if merged.day != day and current.get(merged.day) is not None:
                raise DuplicateReport(merged.day)
            reports = [r for r in current if r.day != day]
            days = [r.day for r in reports]
            reports.insert(bisect.bisect_left(days, merged.day), merged)
            self._commit(reports)
        logger.info(f"Updated report for {day}")
        return merged

    def delete(self, day: DayLike) -> DailyReport:
        """Remove the report for day."""
        day = to_day(day)
        with self._lock:
            current = self._series
            existing = current.get(day)
            if existing is None:
                raise ReportNotFound(day)
            self._commit([r for r in current if r.day != day])
        logger.info(f"Deleted report for {day}")
        return existing

    def _commit(self, reports: List[DailyReport]) -> None:
        """Durably write reports, then make them the current series."""
        if self.path is not None:
            self._write(reports)
        self._series = ReportSeries(reports)

    def _write(self, reports: List[DailyReport]) -> None:
        path = self.path
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump([r.to_record() for r in reports], f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(f"Error writing data file {path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceFailure(f"Could not write {path}: {e}") from e
