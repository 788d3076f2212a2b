from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import CloudSyncStatus
from ..reports.model import Report


@dataclass(frozen=True)
class SaveOutcome:
    """Result of the save-session use case."""

    report: Report
    persisted: bool
    cloud_status: CloudSyncStatus
    persistence_error: Optional[str] = None
    cloud_error: Optional[str] = None
