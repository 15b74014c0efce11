"""SQLite connection for the settings database.

One file holds both the namespaced settings (including the recorded
migration version) and the journal entries the bootstrap step inspects.
The schema is created on connect, so a fresh path is immediately usable.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import DatabaseError
from .schema import get_schema


class Database:
    """Owns the sqlite3 connection and maps its errors to DatabaseError."""

    def __init__(self, path: Path):
        """Initialize database with path.

        Args:
            path: Path to the SQLite file; parent directories are created.
        """
        self.path = path
        self._connection: sqlite3.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        """Open the file and create missing tables."""
        if self._connection is not None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path))
            self._connection.row_factory = sqlite3.Row
        except (OSError, sqlite3.Error) as e:
            self._connection = None
            raise DatabaseError(f"Failed to open {self.path}: {e}") from e

        self.executescript(get_schema())
        logger.debug(f"Opened settings database {self.path}")

    def close(self) -> None:
        """Close the connection if open."""
        connection, self._connection = self._connection, None
        if connection is None:
            return
        try:
            connection.close()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to close {self.path}: {e}") from e

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("Database not connected")
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back and raise DatabaseError on error."""
        connection = self._require_connection()
        cursor = connection.cursor()
        try:
            yield cursor
            connection.commit()
        except Exception as e:
            connection.rollback()
            raise DatabaseError(f"Transaction failed: {e}") from e
        finally:
            cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run one statement outside an explicit transaction."""
        connection = self._require_connection()
        try:
            return connection.execute(sql, params)
        except sqlite3.Error as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def executescript(self, sql: str) -> None:
        """Run several statements (used for the schema)."""
        connection = self._require_connection()
        try:
            connection.executescript(sql)
        except sqlite3.Error as e:
            raise DatabaseError(f"Script execution failed: {e}") from e
