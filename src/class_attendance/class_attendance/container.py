from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .analytics.service import AnalyticsService
from .cloud.client import CloudSyncClient
from .common.datetime_utils import now_local
from .common.identifiers import new_report_id
from .core.constants import DEFAULT_CLOUD_SYNC_TIMEOUT, STORAGE_KEY
from .core.exceptions import ValidationError
from .database.bootstrap import ensure_schema
from .database.connection import DBConfig, DatabaseConnection
from .export.service import ExportService
from .reports.archive import ReportArchive
from .reports.file_blob_repository import FileBlobRepository
from .reports.mysql_blob_repository import MySQLBlobRepository
from .reports.repository import BlobRepository
from .reports.store import LoadResult, ReportStore
from .roster.service import Roster
from .sessions.service import SessionService


@dataclass(frozen=True)
class Container:
    roster: Roster
    blobs: BlobRepository
    archive: ReportArchive
    report_store: ReportStore
    load_result: LoadResult
    cloud_client: CloudSyncClient

    session_service: SessionService
    analytics_service: AnalyticsService
    export_service: ExportService


def build_blob_repository(*, backend: str, storage_dir: str, db_config: Optional[dict], auto_init_db: bool = False) -> BlobRepository:
    backend = (backend or "file").lower()
    if backend == "file":
        return FileBlobRepository(storage_dir)
    if backend == "mysql":
        if not db_config:
            raise ValidationError("STORAGE_BACKEND=mysql requires DB_CONFIG")
        if auto_init_db:
            ensure_schema(db_config)
        return MySQLBlobRepository(DatabaseConnection(DBConfig.from_dict(db_config)))
    raise ValidationError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(
    *,
    storage_backend: str = "file",
    storage_dir: str = "instance",
    storage_key: str = STORAGE_KEY,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
    cloud_sync_url: Optional[str] = None,
    cloud_sync_timeout: float = DEFAULT_CLOUD_SYNC_TIMEOUT,
    school_name: str = "",
    programme_name: str = "",
    roster: Optional[Roster] = None,
    clock: Callable[[], datetime] = now_local,
    id_factory: Callable[[], str] = new_report_id,
) -> Container:
    roster = roster or Roster.default()

    blobs = build_blob_repository(
        backend=storage_backend,
        storage_dir=storage_dir,
        db_config=db_config,
        auto_init_db=auto_init_db,
    )
    archive = ReportArchive(blobs, key=storage_key)
    report_store = ReportStore(archive)
    load_result = report_store.load()

    cloud_client = CloudSyncClient(cloud_sync_url, timeout=cloud_sync_timeout)

    session_service = SessionService(
        roster,
        report_store,
        cloud=cloud_client,
        clock=clock,
        id_factory=id_factory,
    )
    analytics_service = AnalyticsService(report_store, roster)
    export_service = ExportService(roster, school_name=school_name, programme_name=programme_name)

    return Container(
        roster=roster,
        blobs=blobs,
        archive=archive,
        report_store=report_store,
        load_result=load_result,
        cloud_client=cloud_client,
        session_service=session_service,
        analytics_service=analytics_service,
        export_service=export_service,
    )
