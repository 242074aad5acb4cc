"""Key-value storage implementation using SQLite3.

Persists small pieces of application state (language pack install flags and the
serialized offline translation cache) between runs.
"""

from __future__ import annotations

import json
import sqlite3
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging


__all__: list[str] = ["KeyValueStorage"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class KeyValueStorage:
    """SQLite3-backed string key-value store.

    The connection is opened lazily on first use or when entering the context manager,
    and runs in autocommit mode so every write is durable immediately.

    Attributes:
        db_path (Path): Path to the SQLite database file.
        _connection (sqlite3.Connection | None): Active database connection.
    """

    def __init__(self, db_path: str | Path) -> None:
        """Set the database location without opening it.

        Args:
            db_path (str | Path): Path to the SQLite database file.

        Raises:
            RuntimeError: If the database path is empty.
        """
        if str(db_path).strip() == "":
            msg: str = "The database path is empty."
            raise RuntimeError(msg)

        self.db_path: Path = Path(db_path)
        self._connection: sqlite3.Connection | None = None
        logger.debug("Key-value storage path set to: %s", self.db_path)

    def __enter__(self) -> Self:
        self._initialize_database()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        self.close()

    def _initialize_database(self) -> None:
        """Open the connection and create the table if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._connection = sqlite3.connect(
            str(self.db_path),
            check_same_thread=False,
            isolation_level=None,  # autocommit
        )
        self._connection.row_factory = sqlite3.Row
        self._connection.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at REAL NOT NULL
            )
            """
        )
        logger.debug("Key-value database initialized")

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the active database connection, opening it on first use."""
        if self._connection is None:
            self._initialize_database()
        if self._connection is None:
            msg = "Database connection could not be initialized."
            raise RuntimeError(msg)
        return self._connection

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the stored value for ``key``, or ``default`` if absent."""
        row = self.connection.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        if row is None:
            return default
        return row["value"]

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for ``key``."""
        self.connection.execute(
            "INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
            (key, value, time.time()),
        )
        logger.debug("Stored key: %s", key)

    def delete(self, key: str) -> bool:
        """Delete ``key``.

        Returns:
            bool: True if a row was removed.
        """
        cursor: sqlite3.Cursor = self.connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        return cursor.rowcount > 0

    def keys(self, prefix: str = "") -> list[str]:
        """Return stored keys starting with ``prefix``, sorted."""
        cursor: sqlite3.Cursor = self.connection.execute(
            "SELECT key FROM kv_store WHERE substr(key, 1, length(?)) = ? ORDER BY key",
            (prefix, prefix),
        )
        return [row["key"] for row in cursor.fetchall()]

    def clear(self, prefix: str = "") -> int:
        """Delete every key starting with ``prefix`` (all keys when empty).

        Returns:
            int: Number of rows removed.
        """
        cursor: sqlite3.Cursor = self.connection.execute(
            "DELETE FROM kv_store WHERE substr(key, 1, length(?)) = ?",
            (prefix, prefix),
        )
        logger.debug("Cleared %d keys with prefix '%s'", cursor.rowcount, prefix)
        return cursor.rowcount

    def get_json(self, key: str) -> Any | None:
        """Return the decoded JSON value for ``key``.

        Unparseable values are logged and reported as absent.
        """
        raw: str | None = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as err:
            logger.warning("Ignoring corrupt JSON stored under '%s': %s", key, err)
            return None

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("Key-value database connection closed")
