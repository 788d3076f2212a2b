from __future__ import annotations

import random
from datetime import date

import pytest

from src.class_attendance.class_attendance.core.enums import Subject, Timeslot
from src.class_attendance.class_attendance.core.exceptions import (
    IncompleteSessionError,
    UnknownPupilError,
    UnknownTeacherError,
    ValidationError,
)
from src.class_attendance.class_attendance.roster.service import Roster
from src.class_attendance.class_attendance.sessions.session import AttendanceSession


@pytest.fixture
def session(roster):
    return AttendanceSession(roster, on_date=date(2025, 3, 14))


def _complete(session: AttendanceSession) -> None:
    session.set_teacher("t3")
    session.set_subject("Matematik")
    session.set_timeslot("07:00 - 08:00 pm")


def test_new_session_everyone_absent(session, roster):
    assert session.total_present() == 0
    assert all(not session.is_present(p.pupil_id) for p in roster.list_pupils())


def test_toggle_twice_restores_flag(session, roster):
    for p in roster.list_pupils():
        before = session.is_present(p.pupil_id)
        session.toggle_attendance(p.pupil_id)
        session.toggle_attendance(p.pupil_id)
        assert session.is_present(p.pupil_id) == before


def test_toggle_defaults_to_absent_then_present(session):
    assert session.toggle_attendance("p-0") is True
    assert session.attendance == {"p-0": True}


def test_toggle_unknown_pupil_fails(session):
    with pytest.raises(UnknownPupilError):
        session.toggle_attendance("p-999")
    assert session.attendance == {}


def test_set_all_in_year_only_touches_that_year(session, roster):
    session.toggle_attendance(roster.pupils_in_year(2)[0].pupil_id)

    session.set_all_in_year(1, True)

    assert all(session.is_present(p.pupil_id) for p in roster.pupils_in_year(1))
    assert session.total_present() == 3 + 1


def test_set_all_in_year_select_then_reset_is_idempotent(session, roster):
    for _ in range(2):
        session.set_all_in_year(4, True)
        session.set_all_in_year(4, False)
    assert all(not session.is_present(p.pupil_id) for p in roster.pupils_in_year(4))

    session.set_all_in_year(4, True)
    once = session.attendance
    session.set_all_in_year(4, True)
    assert session.attendance == once


def test_set_all_in_year_rejects_invalid_year(session):
    with pytest.raises(ValidationError):
        session.set_all_in_year(9, True)


def test_total_present_tracks_random_mutations(session, roster):
    rng = random.Random(7)
    ids = [p.pupil_id for p in roster.list_pupils()]
    for _ in range(200):
        if rng.random() < 0.8:
            session.toggle_attendance(rng.choice(ids))
        else:
            session.set_all_in_year(rng.randint(1, 6), rng.random() < 0.5)
        assert session.total_present() == sum(1 for v in session.attendance.values() if v)


def test_setters_validate_membership(session):
    with pytest.raises(UnknownTeacherError):
        session.set_teacher("t-999")
    with pytest.raises(ValidationError):
        session.set_subject("Geografi")
    with pytest.raises(ValidationError):
        session.set_timeslot("09:00 - 10:00 am")
    with pytest.raises(ValidationError):
        session.set_date("2025-03-14")


def test_setters_accept_none_to_clear(session):
    _complete(session)
    session.set_subject(None)
    assert session.subject is None


@pytest.mark.parametrize("missing", ["teacher", "subject", "timeslot"])
def test_finalize_requires_teacher_subject_timeslot(session, missing, fixed_clock, sequential_ids):
    _complete(session)
    getattr(session, f"set_{missing}")(None)

    with pytest.raises(IncompleteSessionError):
        session.finalize(sequential_ids, fixed_clock)


def test_incomplete_session_error_is_a_validation_error(session, fixed_clock, sequential_ids):
    with pytest.raises(ValidationError):
        session.finalize(sequential_ids, fixed_clock)


def test_finalize_builds_report_snapshot(session, fixed_clock, sequential_ids):
    _complete(session)
    session.toggle_attendance("p-0")
    session.toggle_attendance("p-5")
    session.set_date(date(2025, 3, 10))

    report = session.finalize(sequential_ids, fixed_clock)

    assert report.report_id == "r-1"
    assert report.date == date(2025, 3, 10)
    assert report.created_at == fixed_clock()
    assert report.teacher_id == "t3"
    assert report.teacher_name == "DAVE BIN ASON"
    assert report.subject == Subject.MATEMATIK
    assert report.timeslot == Timeslot.EVENING_7
    assert report.total_present == session.total_present() == 2


def test_report_unaffected_by_later_session_changes(session, fixed_clock, sequential_ids):
    _complete(session)
    session.toggle_attendance("p-0")
    report = session.finalize(sequential_ids, fixed_clock)

    session.toggle_attendance("p-0")
    session.set_all_in_year(6, True)

    assert dict(report.attendance) == {"p-0": True}
    assert report.total_present == 1


def test_finalize_does_not_reset_session(session, fixed_clock, sequential_ids):
    _complete(session)
    session.toggle_attendance("p-1")
    session.finalize(sequential_ids, fixed_clock)
    assert session.is_present("p-1")
    assert session.teacher_id == "t3"


def test_finalize_fails_when_teacher_no_longer_resolves(fixed_clock, sequential_ids):
    full = Roster.from_raw([(1, "A")], [("t1", "X")])
    s = AttendanceSession(full, on_date=date(2025, 1, 1))
    s.set_teacher("t1")
    s.set_subject(Subject.SAINS)
    s.set_timeslot(Timeslot.AFTERNOON)

    # Swap in a roster without the teacher, as after a data update
    s._roster = Roster.from_raw([(1, "A")], [("t2", "Y")])

    with pytest.raises(UnknownTeacherError):
        s.finalize(sequential_ids, fixed_clock)
