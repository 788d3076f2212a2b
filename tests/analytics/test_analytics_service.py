from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.class_attendance.class_attendance.analytics.service import AnalyticsService
from src.class_attendance.class_attendance.core.enums import Subject, Timeslot
from src.class_attendance.class_attendance.core.exceptions import ValidationError
from src.class_attendance.class_attendance.reports.model import Report
from src.class_attendance.class_attendance.roster.service import Roster


class FakeStore:
    def __init__(self, reports):
        self._reports = tuple(reports)
        self.list_calls = 0

    def list(self):
        self.list_calls += 1
        return self._reports


def _report(report_id: str, subject: Subject, on: date, present: int) -> Report:
    return Report(
        report_id=report_id,
        date=on,
        created_at=datetime(2025, 1, 1),
        teacher_id="t1",
        teacher_name="X",
        subject=subject,
        timeslot=Timeslot.AFTERNOON,
        attendance={f"p-{i}": True for i in range(present)},
        total_present=present,
    )


def test_summary_uses_one_snapshot_and_current_roster_size(roster):
    store = FakeStore(
        [
            _report("a", Subject.MATEMATIK, date(2025, 3, 3), 20),
            _report("b", Subject.MATEMATIK, date(2025, 3, 4), 25),
            _report("c", Subject.SAINS, date(2025, 3, 5), 10),
            _report("d", Subject.SAINS, date(2025, 5, 5), 27),
        ]
    )
    svc = AnalyticsService(store, roster)

    summary = svc.summary(year=2025, month=3)

    assert store.list_calls == 1
    monthly = {s.subject: s.percentage for s in summary.monthly}
    yearly = {s.subject: s for s in summary.yearly}
    assert monthly[Subject.MATEMATIK] == 83
    assert monthly[Subject.SAINS] == 37
    assert yearly[Subject.SAINS].session_count == 2
    assert yearly[Subject.SAINS].percentage == 69
    # mean of Sains 69 and Matematik 83
    assert summary.overall_average == 76


def test_roster_growth_changes_historical_denominator():
    store = FakeStore([_report("a", Subject.SAINS, date(2025, 3, 3), 2)])
    small = Roster.from_raw([(1, "A"), (1, "B")], [("t1", "X")])
    large = Roster.from_raw([(1, "A"), (1, "B"), (2, "C"), (2, "D")], [("t1", "X")])

    assert AnalyticsService(store, small).yearly(2025)[0].percentage == 100
    assert AnalyticsService(store, large).yearly(2025)[0].percentage == 50


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month_is_rejected(roster, month):
    svc = AnalyticsService(FakeStore([]), roster)
    with pytest.raises(ValidationError):
        svc.monthly(2025, month)
