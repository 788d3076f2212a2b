from __future__ import annotations

from typing import Callable

from ..reports.model import Report

ReportFilter = Callable[[Report], bool]


def monthly(year: int, month: int) -> ReportFilter:
    """Reports whose session date falls in (year, month); month is 1-12."""

    def _match(r: Report) -> bool:
        return r.date.year == year and r.date.month == month

    return _match


def yearly(year: int) -> ReportFilter:
    def _match(r: Report) -> bool:
        return r.date.year == year

    return _match
