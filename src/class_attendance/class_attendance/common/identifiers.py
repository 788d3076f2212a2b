from __future__ import annotations

import uuid


def new_report_id() -> str:
    """Random id; never reused across the lifetime of a history."""
    return uuid.uuid4().hex
