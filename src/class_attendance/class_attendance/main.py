from __future__ import annotations

import importlib
import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .common.datetime_utils import now_local
from .common.identifiers import new_report_id
from .container import build_container
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .sessions.controller import register as register_sessions

_LOGGER = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "STORAGE_BACKEND",
    "STORAGE_DIR",
    "STORAGE_KEY",
    "DB_CONFIG",
    "AUTO_INIT_DB",
    "CLOUD_SYNC_URL",
    "CLOUD_SYNC_TIMEOUT",
    "SCHOOL_NAME",
    "PROGRAMME_NAME",
)


def create_app(
    overrides: Optional[dict] = None,
    *,
    clock: Callable[[], datetime] = now_local,
    id_factory: Callable[[], str] = new_report_id,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})
    app.secret_key = app.config.get("SECRET_KEY")

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(
        storage_backend=app.config.get("STORAGE_BACKEND", "file"),
        storage_dir=app.config.get("STORAGE_DIR", "instance"),
        storage_key=app.config["STORAGE_KEY"],
        db_config=app.config.get("DB_CONFIG"),
        auto_init_db=bool(app.config.get("AUTO_INIT_DB", False)),
        cloud_sync_url=app.config.get("CLOUD_SYNC_URL") or None,
        cloud_sync_timeout=float(app.config.get("CLOUD_SYNC_TIMEOUT", 15)),
        school_name=app.config.get("SCHOOL_NAME", ""),
        programme_name=app.config.get("PROGRAMME_NAME", ""),
        clock=clock,
        id_factory=id_factory,
    )
    app.extensions["class_attendance"] = container

    _LOGGER.info(
        "settings=%s storage=%s reports=%d cloud_sync=%s",
        settings_module,
        app.config.get("STORAGE_BACKEND"),
        len(container.report_store.list()),
        "on" if container.cloud_client.enabled else "off",
    )
    if container.load_result.error:
        _LOGGER.error("History could not be loaded and starts empty: %s", container.load_result.error)

    register_roster(app, container)
    register_sessions(app, container)
    register_reports(app, container)
    register_analytics(app, container)

    return app
