from __future__ import annotations

from typing import Iterable

from ..core.constants import STORAGE_KEY
from .codec import DecodedHistory, decode_history, encode_history
from .model import Report
from .repository import BlobRepository


class ReportArchive:
    """Whole-history persistence: one blob under one fixed key."""

    def __init__(self, blobs: BlobRepository, *, key: str = STORAGE_KEY):
        self._blobs = blobs
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load_reports(self) -> DecodedHistory:
        raw = self._blobs.read(self._key)
        if raw is None:
            return DecodedHistory(reports=[])
        return decode_history(raw)

    def save_reports(self, reports: Iterable[Report]) -> None:
        self._blobs.write(self._key, encode_history(reports))
