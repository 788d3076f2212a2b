"""Backup the report history.

Note: Writes a timestamped JSON copy of the current history blob into
`backups/`, whichever storage backend is configured.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_blob_repository
from src.class_attendance.class_attendance.core.exceptions import PersistenceError
from src.class_attendance.class_attendance.reports.archive import ReportArchive
from src.class_attendance.class_attendance.reports.file_blob_repository import FileBlobRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    blobs = build_blob_repository(
        backend=settings.STORAGE_BACKEND,
        storage_dir=settings.STORAGE_DIR,
        db_config=settings.DB_CONFIG,
    )
    source = ReportArchive(blobs, key=settings.STORAGE_KEY)

    out_dir = REPO_ROOT / "backups"
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    target = ReportArchive(FileBlobRepository(out_dir), key=f"{settings.STORAGE_KEY}_{ts}")

    try:
        history = source.load_reports()
        target.save_reports(history.reports)
    except PersistenceError as e:
        raise SystemExit(f"Backup failed: {e}")

    print(f"OK: Backup created: {out_dir / (target.key + '.json')} ({len(history.reports)} reports, {history.dropped} dropped)")


if __name__ == "__main__":
    main()
