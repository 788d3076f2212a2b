from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import PersistenceError, ValidationError
from .archive import ReportArchive
from .model import Report

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    reports: tuple[Report, ...]
    dropped: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a mutating call.

    `persisted` is False when the write failed; the in-memory change is kept
    regardless.
    """

    changed: bool
    persisted: bool
    error: Optional[str] = None


class ReportStore:
    """Owns the report history (newest first) and keeps storage in sync.

    Every mutation rewrites the whole collection, so mutations are serialized
    behind one lock. `list()` hands out immutable snapshots.
    """

    def __init__(self, archive: ReportArchive):
        self._archive = archive
        self._reports: tuple[Report, ...] = ()
        self._lock = threading.Lock()
        self._loaded: Optional[LoadResult] = None

    def load(self) -> LoadResult:
        """Read the persisted history once; later calls do not touch storage."""

        with self._lock:
            if self._loaded is not None:
                return LoadResult(reports=self._reports, dropped=self._loaded.dropped, error=self._loaded.error)
            return self._load_locked()

    def _load_locked(self) -> LoadResult:
        try:
            history = self._archive.load_reports()
        except PersistenceError as e:
            _LOGGER.error("Failed to load report history, starting empty: %s", e)
            result = LoadResult(reports=(), error=str(e))
        else:
            if history.dropped:
                _LOGGER.warning("Dropped %d malformed report(s) while loading history", history.dropped)
            result = LoadResult(reports=tuple(history.reports), dropped=history.dropped)

        self._reports = result.reports
        self._loaded = result
        _LOGGER.info("Loaded %d report(s)", len(self._reports))
        return result

    def _ensure_loaded(self) -> None:
        # A mutation before load() would otherwise overwrite the stored history.
        if self._loaded is None:
            self._load_locked()

    def list(self) -> tuple[Report, ...]:
        return self._reports

    def get(self, report_id: str) -> Optional[Report]:
        for r in self._reports:
            if r.report_id == report_id:
                return r
        return None

    def add(self, report: Report) -> StoreResult:
        with self._lock:
            self._ensure_loaded()
            if any(r.report_id == report.report_id for r in self._reports):
                raise ValidationError(f"Laporan {report.report_id} sudah wujud")
            self._reports = (report,) + self._reports
            _LOGGER.info("Added report %s (%s, %s)", report.report_id, report.subject.value, report.date.isoformat())
            return self._persist()

    def delete_by_id(self, report_id: str) -> StoreResult:
        with self._lock:
            self._ensure_loaded()
            remaining = tuple(r for r in self._reports if r.report_id != report_id)
            if len(remaining) == len(self._reports):
                return StoreResult(changed=False, persisted=True)
            self._reports = remaining
            _LOGGER.info("Deleted report %s", report_id)
            return self._persist()

    def clear(self) -> StoreResult:
        with self._lock:
            self._ensure_loaded()
            count = len(self._reports)
            self._reports = ()
            _LOGGER.info("Cleared %d report(s)", count)
            result = self._persist()
            return StoreResult(changed=count > 0, persisted=result.persisted, error=result.error)

    def _persist(self) -> StoreResult:
        try:
            self._archive.save_reports(self._reports)
        except PersistenceError as e:
            _LOGGER.error("Failed to persist report history (%d in memory): %s", len(self._reports), e)
            return StoreResult(changed=True, persisted=False, error=str(e))
        return StoreResult(changed=True, persisted=True)
