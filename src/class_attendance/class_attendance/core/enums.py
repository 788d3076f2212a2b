from __future__ import annotations

from enum import Enum


class Subject(str, Enum):
    """Subjek yang diajar dalam kelas bimbingan (urutan tetap)."""

    SAINS = "Sains"
    BAHASA_INGGERIS = "Bahasa Inggeris"
    MATEMATIK = "Matematik"
    SEJARAH = "Sejarah"


class Timeslot(str, Enum):
    """Slot masa sesi (urutan tetap)."""

    AFTERNOON = "02:30 - 03:30 pm"
    EVENING_7 = "07:00 - 08:00 pm"
    EVENING_8 = "08:00 - 09:00 pm"
    EVENING_830 = "08:30 - 09:30 pm"


class CloudSyncStatus(str, Enum):
    """Outcome of the best-effort remote submission after a save."""

    SENT = "sent"
    FAILED = "failed"
    DISABLED = "disabled"
