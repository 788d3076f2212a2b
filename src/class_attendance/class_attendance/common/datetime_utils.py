from __future__ import annotations

from datetime import date, datetime

from ..core.constants import MONTH_NAMES_MS
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Tarikh tidak sah: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_long_date(value: date) -> str:
    """Malay long form, e.g. '05 Mac 2025'."""
    return f"{value.day:02d} {MONTH_NAMES_MS[value.month - 1]} {value.year}"


def month_name(month: int) -> str:
    return MONTH_NAMES_MS[month - 1]
