from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..common.validators import parse_subject, parse_timeslot, require_year_group
from ..core.enums import Subject, Timeslot
from ..core.exceptions import IncompleteSessionError, UnknownPupilError, UnknownTeacherError, ValidationError
from ..reports.model import Report, count_present
from ..roster.service import Roster


class AttendanceSession:
    """Working state of one attendance-taking session.

    An incomplete session is a valid intermediate state; completeness is only
    enforced by `finalize`. A pupil missing from the map counts as absent.
    """

    def __init__(self, roster: Roster, *, on_date: date):
        self._roster = roster
        self._date: date = on_date
        self._teacher_id: Optional[str] = None
        self._subject: Optional[Subject] = None
        self._timeslot: Optional[Timeslot] = None
        self._attendance: dict[str, bool] = {}

    @property
    def date(self) -> date:
        return self._date

    @property
    def teacher_id(self) -> Optional[str]:
        return self._teacher_id

    @property
    def subject(self) -> Optional[Subject]:
        return self._subject

    @property
    def timeslot(self) -> Optional[Timeslot]:
        return self._timeslot

    @property
    def attendance(self) -> dict[str, bool]:
        return dict(self._attendance)

    def set_date(self, value: date) -> None:
        if isinstance(value, datetime) or not isinstance(value, date):
            raise ValidationError("Tarikh tidak sah")
        self._date = value

    def set_teacher(self, teacher_id: Optional[str]) -> None:
        if teacher_id is None:
            self._teacher_id = None
            return
        if not self._roster.get_teacher(teacher_id):
            raise UnknownTeacherError(f"Guru tidak wujud: {teacher_id}")
        self._teacher_id = teacher_id

    def set_subject(self, subject: Optional[str | Subject]) -> None:
        self._subject = parse_subject(subject) if subject is not None else None

    def set_timeslot(self, timeslot: Optional[str | Timeslot]) -> None:
        self._timeslot = parse_timeslot(timeslot) if timeslot is not None else None

    def is_present(self, pupil_id: str) -> bool:
        return self._attendance.get(pupil_id, False)

    def toggle_attendance(self, pupil_id: str) -> bool:
        if not self._roster.get_pupil(pupil_id):
            raise UnknownPupilError(f"Murid tidak wujud: {pupil_id}")
        present = not self._attendance.get(pupil_id, False)
        self._attendance[pupil_id] = present
        return present

    def set_all_in_year(self, year: int, present: bool) -> int:
        year = require_year_group(year)
        pupils = self._roster.pupils_in_year(year)
        for p in pupils:
            self._attendance[p.pupil_id] = bool(present)
        return len(pupils)

    def total_present(self) -> int:
        return count_present(self._attendance)

    def teacher_name(self) -> Optional[str]:
        if not self._teacher_id:
            return None
        teacher = self._roster.get_teacher(self._teacher_id)
        return teacher.name if teacher else None

    def finalize(self, id_factory: Callable[[], str], clock: Callable[[], datetime]) -> Report:
        missing = [
            label
            for label, value in (("Guru", self._teacher_id), ("Subjek", self._subject), ("Slot Masa", self._timeslot))
            if not value
        ]
        if missing:
            raise IncompleteSessionError("Sila pilih " + ", ".join(missing) + ".")

        teacher = self._roster.get_teacher(self._teacher_id)
        if not teacher:
            raise UnknownTeacherError(f"Guru tidak wujud: {self._teacher_id}")

        attendance = dict(self._attendance)
        return Report(
            report_id=id_factory(),
            date=self._date,
            created_at=clock(),
            teacher_id=teacher.teacher_id,
            teacher_name=teacher.name,
            subject=self._subject,
            timeslot=self._timeslot,
            attendance=attendance,
            total_present=count_present(attendance),
        )
