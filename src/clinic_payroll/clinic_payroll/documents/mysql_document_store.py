from __future__ import annotations

import json
from typing import Any, Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import DocumentStore


class MySQLDocumentStore(DocumentStore):
    """Stores each document as JSON text in the ``documents`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, key: str) -> Optional[dict[str, Any]]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT doc_value FROM documents WHERE doc_key=%s", (key,))
                r = fetchone(cur)
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to read document {key!r}: {e}") from e

        if not r:
            return None
        try:
            value = json.loads(r["doc_value"])
        except ValueError as e:
            raise StorageError(f"Document {key!r} is not valid JSON") from e
        if not isinstance(value, dict):
            raise StorageError(f"Document {key!r} is not a JSON object")
        return value

    def save(self, key: str, value: dict[str, Any]) -> None:
        payload = json.dumps(value, ensure_ascii=False, sort_keys=True)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO documents(doc_key, doc_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE doc_value=VALUES(doc_value)
                    """,
                    (key, payload),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to write document {key!r}: {e}") from e
