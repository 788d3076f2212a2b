from __future__ import annotations

from datetime import datetime
from itertools import count

import pytest

from src.class_attendance.class_attendance.roster.service import Roster


@pytest.fixture
def roster() -> Roster:
    return Roster.default()


@pytest.fixture
def fixed_clock():
    def _clock() -> datetime:
        return datetime(2025, 3, 14, 20, 15, 0)

    return _clock


@pytest.fixture
def sequential_ids():
    counter = count(1)

    def _next() -> str:
        return f"r-{next(counter)}"

    return _next
