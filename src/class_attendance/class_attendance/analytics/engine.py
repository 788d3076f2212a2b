"""Pure aggregation of reports into per-subject attendance statistics.

The denominator uses the roster size passed in at query time, not a value
stored per report.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Subject
from ..reports.model import Report
from .filters import ReportFilter
from .model import SubjectStats


def rounded_percentage(part: int, whole: int) -> int:
    """100 * part / whole rounded half up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def compute_stats(
    reports: Iterable[Report],
    roster_size: int,
    predicate: Optional[ReportFilter] = None,
    *,
    subjects: Sequence[Subject] = tuple(Subject),
) -> list[SubjectStats]:
    selected = [r for r in reports if predicate is None or predicate(r)]

    out: list[SubjectStats] = []
    for subject in subjects:
        sub_reports = [r for r in selected if r.subject == subject]
        session_count = len(sub_reports)
        total_present = sum(r.total_present for r in sub_reports)
        total_possible = session_count * int(roster_size)
        out.append(
            SubjectStats(
                subject=subject,
                total_present=total_present,
                total_possible=total_possible,
                percentage=rounded_percentage(total_present, total_possible),
                session_count=session_count,
            )
        )
    return out


def overall_average(stats: Iterable[SubjectStats]) -> int:
    """Mean percentage over subjects that had at least one session."""
    active = [s.percentage for s in stats if s.session_count > 0]
    if not active:
        return 0
    return rounded_percentage(sum(active), 100 * len(active))
