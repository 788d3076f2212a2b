from __future__ import annotations

import logging

from .connection import DBConfig, DatabaseConnection

_LOGGER = logging.getLogger(__name__)

KV_TABLE = "kv_store"

KV_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS `{KV_TABLE}` (
    store_key VARCHAR(191) NOT NULL PRIMARY KEY,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def ensure_schema(db_config: dict) -> None:
    """Create the database and the key/value table if missing (idempotent)."""

    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    ensure_database_exists(conn_factory)

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute(KV_SCHEMA)
        conn.commit()
    finally:
        conn.close()
    _LOGGER.info("Schema ready on %s/%s", conn_factory.config.host, conn_factory.config.database)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
