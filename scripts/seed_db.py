"""Seed demo history: a few sessions per subject for the current month."""

from __future__ import annotations

import asyncio
import importlib
import random
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


async def _seed(container, *, sessions_per_subject: int, rng: random.Random) -> int:
    svc = container.session_service
    roster = container.roster
    today = datetime.now().date()
    created = 0

    for subject in roster.list_subjects():
        for n in range(sessions_per_subject):
            svc.reset()
            svc.update(
                date_value=today.replace(day=min(1 + n * 7, 28)),
                teacher_id=rng.choice(roster.list_teachers()).teacher_id,
                subject=subject,
                timeslot=rng.choice(roster.list_timeslots()),
            )
            for p in roster.list_pupils():
                if rng.random() < 0.8:
                    svc.session.toggle_attendance(p.pupil_id)
            outcome = await svc.save()
            created += 1 if outcome.persisted else 0

    svc.reset()
    return created


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage_backend=settings.STORAGE_BACKEND,
        storage_dir=settings.STORAGE_DIR,
        storage_key=settings.STORAGE_KEY,
        db_config=settings.DB_CONFIG,
        auto_init_db=settings.AUTO_INIT_DB,
    )
    created = asyncio.run(_seed(container, sessions_per_subject=3, rng=random.Random(42)))
    print(f"OK: Seeded {created} demo reports ({len(container.report_store.list())} in history)")


if __name__ == "__main__":
    main()
