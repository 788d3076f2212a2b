from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pupil:
    """Murid dalam senarai kelas.

    `pupil_id` is assigned from the position in the raw roster list, before any
    display ordering, so it stays stable across reads.
    """

    pupil_id: str
    name: str
    year: int


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    name: str


@dataclass(frozen=True)
class YearGroup:
    """Read-model: pupils of one year group plus the live present count."""

    year: int
    pupils: tuple[Pupil, ...]
    present: int = 0

    @property
    def total(self) -> int:
        return len(self.pupils)
