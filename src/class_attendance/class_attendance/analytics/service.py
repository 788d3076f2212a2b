from __future__ import annotations

from ..common.validators import require_month
from ..reports.store import ReportStore
from ..roster.service import Roster
from . import filters
from .engine import compute_stats, overall_average
from .model import AnalyticsSummary, SubjectStats


class AnalyticsService:
    """Read-only statistics over the current report history."""

    def __init__(self, store: ReportStore, roster: Roster):
        self._store = store
        self._roster = roster

    def monthly(self, year: int, month: int) -> list[SubjectStats]:
        month = require_month(month)
        return compute_stats(self._store.list(), self._roster.size, filters.monthly(int(year), month))

    def yearly(self, year: int) -> list[SubjectStats]:
        return compute_stats(self._store.list(), self._roster.size, filters.yearly(int(year)))

    def summary(self, *, year: int, month: int) -> AnalyticsSummary:
        month = require_month(month)
        year = int(year)
        # One snapshot for both windows so they agree with each other.
        reports = self._store.list()
        size = self._roster.size

        monthly = compute_stats(reports, size, filters.monthly(year, month))
        yearly = compute_stats(reports, size, filters.yearly(year))
        return AnalyticsSummary(
            year=year,
            month=month,
            monthly=monthly,
            yearly=yearly,
            overall_average=overall_average(yearly),
        )
