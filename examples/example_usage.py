"""Example: use the service layer directly (without Flask).

Prints this month's per-subject attendance from the configured history.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage_backend=settings.STORAGE_BACKEND,
        storage_dir=settings.STORAGE_DIR,
        storage_key=settings.STORAGE_KEY,
        db_config=settings.DB_CONFIG,
    )
    today = date.today()
    summary = container.analytics_service.summary(year=today.year, month=today.month)
    for s in summary.monthly:
        print(f"{s.subject.value:<16} {s.percentage:>3}% ({s.total_present}/{s.total_possible}, {s.session_count} sesi)")
    print(f"Purata keseluruhan {summary.year}: {summary.overall_average}%")


if __name__ == "__main__":
    main()
