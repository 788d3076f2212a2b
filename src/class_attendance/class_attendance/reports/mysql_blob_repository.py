from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import PersistenceError
from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone


class MySQLBlobRepository:
    """Key/value blobs in a single MySQL table; each write is one transaction."""

    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def read(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn) as (_, cur):
                cur.execute(f"SELECT store_value FROM {KV_TABLE} WHERE store_key=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot read {key!r} from MySQL: {e}") from e
        return row["store_value"] if row else None

    def write(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO {KV_TABLE} (store_key, store_value)
                    VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot write {key!r} to MySQL: {e}") from e
