from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..cloud.client import CloudSyncClient, build_payload
from ..common.datetime_utils import format_long_date, now_local, parse_iso_date
from ..common.identifiers import new_report_id
from ..core.constants import NO_TEACHER_LABEL
from ..core.enums import CloudSyncStatus
from ..core.exceptions import CloudSyncError
from ..reports.store import ReportStore
from ..roster.model import YearGroup
from ..roster.service import Roster
from .model import SaveOutcome
from .session import AttendanceSession

_LOGGER = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class SessionPreview:
    """Read-model of the working session for the preview screen."""

    date: str
    formatted_date: str
    teacher_id: Optional[str]
    teacher_name: str
    subject: Optional[str]
    timeslot: Optional[str]
    total_present: int
    roster_size: int
    years: list[YearGroup]
    attendance: dict[str, bool]


class SessionService:
    """Use cases around the single working session: edit, preview, save, restart."""

    def __init__(
        self,
        roster: Roster,
        store: ReportStore,
        *,
        cloud: Optional[CloudSyncClient] = None,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_report_id,
    ):
        self._roster = roster
        self._store = store
        self._cloud = cloud
        self._clock = clock
        self._id_factory = id_factory
        self._session = self._new_session()

    def _new_session(self) -> AttendanceSession:
        return AttendanceSession(self._roster, on_date=self._clock().date())

    @property
    def session(self) -> AttendanceSession:
        return self._session

    def reset(self) -> AttendanceSession:
        self._session = self._new_session()
        return self._session

    def update(
        self,
        *,
        date_value: object = _UNSET,
        teacher_id: object = _UNSET,
        subject: object = _UNSET,
        timeslot: object = _UNSET,
    ) -> None:
        """Apply the given fields; omitted ones are left alone, None clears."""

        s = self._session
        if date_value is not _UNSET:
            s.set_date(date_value if isinstance(date_value, date) else parse_iso_date(str(date_value)))
        if teacher_id is not _UNSET:
            s.set_teacher(teacher_id or None)
        if subject is not _UNSET:
            s.set_subject(subject or None)
        if timeslot is not _UNSET:
            s.set_timeslot(timeslot or None)

    def preview(self) -> SessionPreview:
        s = self._session
        attendance = s.attendance
        return SessionPreview(
            date=s.date.isoformat(),
            formatted_date=format_long_date(s.date),
            teacher_id=s.teacher_id,
            teacher_name=s.teacher_name() or NO_TEACHER_LABEL,
            subject=s.subject.value if s.subject else None,
            timeslot=s.timeslot.value if s.timeslot else None,
            total_present=s.total_present(),
            roster_size=self._roster.size,
            years=self._roster.year_groups(attendance),
            attendance=attendance,
        )

    async def save(self) -> SaveOutcome:
        """Finalize, store locally, then try the cloud.

        Local storage always happens first; the cloud result never changes it.
        The working session is left as is so the preview stays on screen.
        """

        report = self._session.finalize(self._id_factory, self._clock)
        stored = self._store.add(report)

        if not self._cloud or not self._cloud.enabled:
            return SaveOutcome(
                report=report,
                persisted=stored.persisted,
                persistence_error=stored.error,
                cloud_status=CloudSyncStatus.DISABLED,
            )

        try:
            await self._cloud.submit(build_payload(report, self._roster))
        except CloudSyncError as e:
            _LOGGER.warning("Cloud sync failed for report %s: %s", report.report_id, e)
            return SaveOutcome(
                report=report,
                persisted=stored.persisted,
                persistence_error=stored.error,
                cloud_status=CloudSyncStatus.FAILED,
                cloud_error=str(e),
            )

        return SaveOutcome(
            report=report,
            persisted=stored.persisted,
            persistence_error=stored.error,
            cloud_status=CloudSyncStatus.SENT,
        )
