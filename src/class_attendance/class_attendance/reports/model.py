from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from ..core.enums import Subject, Timeslot
from ..core.exceptions import ValidationError


def count_present(attendance: Mapping[str, bool]) -> int:
    return sum(1 for present in attendance.values() if present)


@dataclass(frozen=True)
class Report:
    """Laporan kehadiran: a finalized session, never mutated after creation.

    `teacher_name` is a snapshot taken at finalize time and `attendance` is a
    read-only copy, so later roster or session changes cannot alter history.
    """

    report_id: str
    date: date
    created_at: datetime
    teacher_id: str
    teacher_name: str
    subject: Subject
    timeslot: Timeslot
    attendance: Mapping[str, bool] = field(default_factory=dict)
    total_present: int = 0

    def __post_init__(self) -> None:
        frozen = MappingProxyType({str(k): bool(v) for k, v in dict(self.attendance).items()})
        object.__setattr__(self, "attendance", frozen)
        if self.total_present != count_present(frozen):
            raise ValidationError(
                f"Report {self.report_id}: total_present={self.total_present} "
                f"does not match attendance ({count_present(frozen)})"
            )

    def __hash__(self) -> int:
        # attendance is a mapping and cannot be hashed; ids are unique in a history
        return hash(self.report_id)

    def is_present(self, pupil_id: str) -> bool:
        return bool(self.attendance.get(pupil_id, False))
