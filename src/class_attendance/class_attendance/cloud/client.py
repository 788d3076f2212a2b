"""Best-effort submission of saved reports to a Google Apps Script endpoint."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from ..core.constants import DEFAULT_CLOUD_SYNC_TIMEOUT
from ..core.exceptions import CloudSyncError
from ..reports.codec import report_to_dict
from ..reports.model import Report
from ..roster.service import Roster

_LOGGER = logging.getLogger(__name__)


def build_payload(report: Report, roster: Roster) -> dict[str, Any]:
    """Report fields plus one row per roster pupil, as the sheet script expects."""

    payload = report_to_dict(report)
    payload["pupilData"] = [
        {"name": p.name, "year": p.year, "isPresent": report.is_present(p.pupil_id)}
        for p in roster.list_pupils()
    ]
    return payload


class CloudSyncClient:
    """Posts a finalized report as JSON.

    The caller owns local persistence; this client only reports success or
    raises CloudSyncError.
    """

    def __init__(
        self,
        url: Optional[str],
        *,
        timeout: float = DEFAULT_CLOUD_SYNC_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self._url = (url or "").strip() or None
        self._timeout = float(timeout)
        self._session = session

    @property
    def enabled(self) -> bool:
        return self._url is not None

    async def submit(self, payload: dict[str, Any]) -> None:
        if not self._url:
            raise CloudSyncError("Cloud sync URL is not configured")

        own_session = self._session is None
        session = self._session or aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout))
        try:
            async with session.post(self._url, json=payload) as resp:
                if resp.status >= 400:
                    raise CloudSyncError(f"Cloud sync failed: HTTP {resp.status}")
                _LOGGER.debug("Cloud sync accepted report %s (HTTP %s)", payload.get("id"), resp.status)
        except aiohttp.ClientError as e:
            raise CloudSyncError(f"Connection error: {e}") from e
        except asyncio.TimeoutError as e:
            raise CloudSyncError(f"Cloud sync timed out after {self._timeout:.0f}s") from e
        finally:
            if own_session:
                await session.close()
