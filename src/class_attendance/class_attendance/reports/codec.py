"""JSON codec for the stored report history.

The blob is treated as an untrusted import boundary: the envelope is checked
first and every entry is validated field by field. Entries that fail are
dropped (and reported) instead of poisoning the whole history.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Iterable, Sequence

from ..core.constants import STORAGE_FORMAT_VERSION
from ..core.enums import Subject, Timeslot
from ..core.exceptions import ReportFormatError, ValidationError
from .model import Report

_LOGGER = logging.getLogger(__name__)

_LEGACY_TIME_FORMATS = ("%H:%M:%S", "%I:%M:%S %p")

# Malay day-period markers written by the device locale (ms-MY).
_MERIDIEM_MS = {"PG": "AM", "PTG": "PM"}


@dataclass(frozen=True)
class DecodedHistory:
    reports: list[Report]
    dropped: int = 0


def report_to_dict(report: Report) -> dict[str, Any]:
    return {
        "id": report.report_id,
        "date": report.date.isoformat(),
        "timestamp": report.created_at.isoformat(),
        "teacherId": report.teacher_id,
        "teacherName": report.teacher_name,
        "subject": report.subject.value,
        "timeslot": report.timeslot.value,
        "attendance": dict(report.attendance),
        "totalPresent": report.total_present,
    }


def _require_str(item: dict, key: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value:
        raise ReportFormatError(f"field {key!r} must be a non-empty string")
    return value


def _normalize_legacy_time(value: str) -> str:
    parts = value.replace("\u202f", " ").split()
    if len(parts) == 2:
        parts[1] = _MERIDIEM_MS.get(parts[1].upper(), parts[1].upper())
    return " ".join(parts)


def _parse_timestamp(value: str, report_date: date) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    # Legacy device entries only kept a local time-of-day string.
    text = _normalize_legacy_time(value)
    for fmt in _LEGACY_TIME_FORMATS:
        try:
            return datetime.combine(report_date, datetime.strptime(text, fmt).time())
        except ValueError:
            continue
    _LOGGER.warning("Unrecognised timestamp %r, using start of %s", value, report_date.isoformat())
    return datetime.combine(report_date, time())


def report_from_dict(item: Any) -> Report:
    if not isinstance(item, dict):
        raise ReportFormatError(f"entry must be an object, got {type(item).__name__}")

    try:
        report_date = date.fromisoformat(_require_str(item, "date"))
        created_at = _parse_timestamp(_require_str(item, "timestamp"), report_date)
        subject = Subject(_require_str(item, "subject"))
        timeslot = Timeslot(_require_str(item, "timeslot"))
    except ValueError as e:
        raise ReportFormatError(str(e)) from e

    attendance = item.get("attendance")
    if not isinstance(attendance, dict) or not all(
        isinstance(k, str) and isinstance(v, bool) for k, v in attendance.items()
    ):
        raise ReportFormatError("field 'attendance' must map pupil ids to booleans")

    total_present = item.get("totalPresent")
    if isinstance(total_present, bool) or not isinstance(total_present, int):
        raise ReportFormatError("field 'totalPresent' must be an integer")

    try:
        return Report(
            report_id=_require_str(item, "id"),
            date=report_date,
            created_at=created_at,
            teacher_id=_require_str(item, "teacherId"),
            teacher_name=_require_str(item, "teacherName"),
            subject=subject,
            timeslot=timeslot,
            attendance=attendance,
            total_present=total_present,
        )
    except ValidationError as e:
        raise ReportFormatError(str(e)) from e


def encode_history(reports: Iterable[Report]) -> str:
    payload = {
        "version": STORAGE_FORMAT_VERSION,
        "reports": [report_to_dict(r) for r in reports],
    }
    return json.dumps(payload, ensure_ascii=False)


def decode_history(raw: str) -> DecodedHistory:
    """Decode a stored blob.

    Accepts the versioned envelope and the legacy bare-array format. Raises
    ReportFormatError when the blob itself is unusable.
    """

    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise ReportFormatError(f"history is not valid JSON: {e}") from e

    entries: Sequence[Any]
    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict):
        version = data.get("version")
        if version != STORAGE_FORMAT_VERSION:
            raise ReportFormatError(f"unsupported history version: {version!r}")
        entries = data.get("reports")
        if not isinstance(entries, list):
            raise ReportFormatError("history envelope has no 'reports' list")
    else:
        raise ReportFormatError(f"history must be a list or object, got {type(data).__name__}")

    reports: list[Report] = []
    seen: set[str] = set()
    dropped = 0
    for index, item in enumerate(entries):
        try:
            report = report_from_dict(item)
        except ReportFormatError as e:
            dropped += 1
            _LOGGER.warning("Dropping malformed report at index %d: %s", index, e)
            continue
        if report.report_id in seen:
            dropped += 1
            _LOGGER.warning("Dropping duplicate report id %s at index %d", report.report_id, index)
            continue
        seen.add(report.report_id)
        reports.append(report)

    return DecodedHistory(reports=reports, dropped=dropped)
