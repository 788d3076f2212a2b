from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..core.constants import MAX_YEAR, MIN_YEAR, YEAR_GROUPS
from ..core.enums import Subject, Timeslot
from ..core.exceptions import RosterDataError
from . import data
from .model import Pupil, Teacher, YearGroup


def _name_key(name: str) -> str:
    return name.casefold()


class Roster:
    """Static reference data: pupils, teachers, subjects and timeslots.

    Built once at startup and never mutated. Construction fails fast when the
    underlying data is malformed so the app refuses to start.
    """

    def __init__(self, pupils: Iterable[Pupil], teachers: Iterable[Teacher]):
        pupils = list(pupils)
        teachers = list(teachers)
        self._validate(pupils, teachers)

        self._pupils: tuple[Pupil, ...] = tuple(sorted(pupils, key=lambda p: (p.year, _name_key(p.name))))
        self._teachers: tuple[Teacher, ...] = tuple(sorted(teachers, key=lambda t: _name_key(t.name)))
        self._pupils_by_id: dict[str, Pupil] = {p.pupil_id: p for p in self._pupils}
        self._teachers_by_id: dict[str, Teacher] = {t.teacher_id: t for t in self._teachers}

    @classmethod
    def from_raw(
        cls,
        raw_pupils: Sequence[tuple[int, str]],
        raw_teachers: Sequence[tuple[str, str]],
    ) -> "Roster":
        pupils = [Pupil(pupil_id=f"p-{index}", name=name, year=year) for index, (year, name) in enumerate(raw_pupils)]
        teachers = [Teacher(teacher_id=teacher_id, name=name) for teacher_id, name in raw_teachers]
        return cls(pupils, teachers)

    @classmethod
    def default(cls) -> "Roster":
        return cls.from_raw(data.RAW_PUPILS, data.TEACHERS)

    @staticmethod
    def _validate(pupils: Sequence[Pupil], teachers: Sequence[Teacher]) -> None:
        seen: set[str] = set()
        for p in pupils:
            if p.pupil_id in seen:
                raise RosterDataError(f"Duplicate pupil id: {p.pupil_id}")
            seen.add(p.pupil_id)
            if not isinstance(p.year, int) or p.year < MIN_YEAR or p.year > MAX_YEAR:
                raise RosterDataError(f"Pupil {p.pupil_id} has invalid year {p.year!r}")
            if not p.name or not p.name.strip():
                raise RosterDataError(f"Pupil {p.pupil_id} has no name")

        seen.clear()
        for t in teachers:
            if t.teacher_id in seen:
                raise RosterDataError(f"Duplicate teacher id: {t.teacher_id}")
            seen.add(t.teacher_id)
            if not t.name or not t.name.strip():
                raise RosterDataError(f"Teacher {t.teacher_id} has no name")

    @property
    def size(self) -> int:
        return len(self._pupils)

    def list_pupils(self) -> tuple[Pupil, ...]:
        return self._pupils

    def list_teachers(self) -> tuple[Teacher, ...]:
        return self._teachers

    @staticmethod
    def list_subjects() -> tuple[Subject, ...]:
        return tuple(Subject)

    @staticmethod
    def list_timeslots() -> tuple[Timeslot, ...]:
        return tuple(Timeslot)

    def get_pupil(self, pupil_id: str) -> Optional[Pupil]:
        return self._pupils_by_id.get(pupil_id)

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return self._teachers_by_id.get(teacher_id)

    def pupils_in_year(self, year: int) -> tuple[Pupil, ...]:
        return tuple(p for p in self._pupils if p.year == year)

    def year_groups(self, attendance: Optional[Mapping[str, bool]] = None) -> list[YearGroup]:
        attendance = attendance or {}
        groups = []
        for year in YEAR_GROUPS:
            pupils = self.pupils_in_year(year)
            present = sum(1 for p in pupils if attendance.get(p.pupil_id))
            groups.append(YearGroup(year=year, pupils=pupils, present=present))
        return groups
