from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.class_attendance.class_attendance.core.constants import STORAGE_KEY
from src.class_attendance.class_attendance.core.enums import Subject, Timeslot
from src.class_attendance.class_attendance.core.exceptions import PersistenceError, ValidationError
from src.class_attendance.class_attendance.reports.archive import ReportArchive
from src.class_attendance.class_attendance.reports.codec import encode_history
from src.class_attendance.class_attendance.reports.model import Report
from src.class_attendance.class_attendance.reports.store import ReportStore


class InMemoryBlobs:
    def __init__(self, initial: Optional[dict] = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0
        self.fail_reads = False
        self.fail_writes = False

    def read(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise PersistenceError("storage unavailable")
        return self.data.get(key)

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceError("quota exceeded")
        self.data[key] = value
        self.writes += 1


def _report(report_id: str, *, on: date = date(2025, 3, 1), subject: Subject = Subject.MATEMATIK) -> Report:
    return Report(
        report_id=report_id,
        date=on,
        created_at=datetime(2025, 3, 1, 20, 0),
        teacher_id="t1",
        teacher_name="ALYSA JULIA ANAK THORNLEY",
        subject=subject,
        timeslot=Timeslot.EVENING_8,
        attendance={"p-0": True},
        total_present=1,
    )


def _store(blobs: InMemoryBlobs) -> ReportStore:
    store = ReportStore(ReportArchive(blobs))
    store.load()
    return store


def test_load_empty_storage():
    result = ReportStore(ReportArchive(InMemoryBlobs())).load()
    assert result.reports == ()
    assert result.error is None


def test_add_then_list_shows_new_report_first():
    store = _store(InMemoryBlobs())
    store.add(_report("a"))
    store.add(_report("b", on=date(2024, 1, 1)))

    # Insertion order, not date order: the back-dated report is still on top
    assert [r.report_id for r in store.list()] == ["b", "a"]


def test_add_persists_full_collection():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    store.add(_report("a"))
    store.add(_report("b"))

    reloaded = _store(blobs)
    assert [r.report_id for r in reloaded.list()] == ["b", "a"]
    assert blobs.writes == 2


def test_add_rejects_reused_id():
    store = _store(InMemoryBlobs())
    store.add(_report("a"))
    with pytest.raises(ValidationError):
        store.add(_report("a"))
    assert len(store.list()) == 1


def test_delete_removes_exactly_that_report():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    for rid in ("a", "b", "c"):
        store.add(_report(rid))

    result = store.delete_by_id("b")

    assert result.changed and result.persisted
    assert [r.report_id for r in store.list()] == ["c", "a"]
    assert [r.report_id for r in _store(blobs).list()] == ["c", "a"]


def test_delete_unknown_id_is_noop():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    store.add(_report("a"))
    writes = blobs.writes

    result = store.delete_by_id("missing")

    assert not result.changed
    assert result.persisted
    assert [r.report_id for r in store.list()] == ["a"]
    assert blobs.writes == writes


def test_clear_empties_memory_and_storage():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    store.add(_report("a"))

    result = store.clear()

    assert result.changed
    assert store.list() == ()
    assert _store(blobs).list() == ()


def test_corrupt_blob_loads_empty_and_reports_error():
    blobs = InMemoryBlobs({STORAGE_KEY: "{corrupt"})
    store = ReportStore(ReportArchive(blobs))

    result = store.load()

    assert result.reports == ()
    assert result.error
    assert store.list() == ()


def test_deeply_nested_blob_loads_empty():
    blobs = InMemoryBlobs({STORAGE_KEY: "[" * 100000 + "]" * 100000})
    store = ReportStore(ReportArchive(blobs))

    result = store.load()

    assert result.reports == ()
    assert result.error


def test_unreadable_storage_loads_empty():
    blobs = InMemoryBlobs()
    blobs.fail_reads = True

    result = ReportStore(ReportArchive(blobs)).load()

    assert result.reports == ()
    assert "storage unavailable" in result.error


def test_load_reports_dropped_entries():
    good = encode_history([_report("ok")])
    raw = good.replace('"reports": [', '"reports": [{"id": 1}, ')
    result = ReportStore(ReportArchive(InMemoryBlobs({STORAGE_KEY: raw}))).load()

    assert [r.report_id for r in result.reports] == ["ok"]
    assert result.dropped == 1


def test_second_load_does_not_reread_storage():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    store.add(_report("a"))

    blobs.data[STORAGE_KEY] = encode_history([])
    result = store.load()

    assert [r.report_id for r in result.reports] == ["a"]


def test_mutation_before_load_keeps_existing_history():
    blobs = InMemoryBlobs({STORAGE_KEY: encode_history([_report("old")])})
    store = ReportStore(ReportArchive(blobs))

    store.add(_report("new"))

    assert [r.report_id for r in store.list()] == ["new", "old"]


def test_save_failure_keeps_in_memory_state():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    blobs.fail_writes = True

    result = store.add(_report("a"))

    assert result.changed
    assert not result.persisted
    assert "quota" in result.error
    assert [r.report_id for r in store.list()] == ["a"]


def test_recovered_storage_gets_full_collection_on_next_write():
    blobs = InMemoryBlobs()
    store = _store(blobs)
    blobs.fail_writes = True
    store.add(_report("a"))
    blobs.fail_writes = False

    store.add(_report("b"))

    assert [r.report_id for r in _store(blobs).list()] == ["b", "a"]


def test_list_is_an_immutable_snapshot():
    store = _store(InMemoryBlobs())
    store.add(_report("a"))
    snapshot = store.list()

    store.add(_report("b"))

    assert [r.report_id for r in snapshot] == ["a"]
    assert isinstance(snapshot, tuple)


def test_archive_round_trip_is_field_for_field(tmp_path):
    from src.class_attendance.class_attendance.reports.file_blob_repository import FileBlobRepository

    archive = ReportArchive(FileBlobRepository(tmp_path))
    reports = [_report("b", subject=Subject.SAINS), _report("a")]

    archive.save_reports(reports)

    assert archive.load_reports().reports == reports
