from __future__ import annotations

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.enums import Subject, Timeslot
from ..core.exceptions import ValidationError


def require_year_group(value: int) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Tahun tidak sah: {value!r}")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(f"Tahun mesti antara {MIN_YEAR} dan {MAX_YEAR}")
    return year


def require_month(value: int) -> int:
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Bulan tidak sah: {value!r}")
    if month < 1 or month > 12:
        raise ValidationError("Bulan mesti antara 1 dan 12")
    return month


def parse_subject(value: str | Subject) -> Subject:
    try:
        return Subject(value)
    except ValueError:
        raise ValidationError(f"Subjek tidak sah: {value!r}")


def parse_timeslot(value: str | Timeslot) -> Timeslot:
    try:
        return Timeslot(value)
    except ValueError:
        raise ValidationError(f"Slot masa tidak sah: {value!r}")
