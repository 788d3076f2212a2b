from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Subject


@dataclass(frozen=True)
class SubjectStats:
    """Derived per-subject attendance figures; computed fresh on every query."""

    subject: Subject
    total_present: int
    total_possible: int
    percentage: int
    session_count: int


@dataclass(frozen=True)
class AnalyticsSummary:
    year: int
    month: int
    monthly: list[SubjectStats]
    yearly: list[SubjectStats]
    overall_average: int
