"""Namespaced settings persisted in SQLite."""

from datetime import datetime

from loguru import logger

from ..core.exceptions import DatabaseError, SettingsError
from .database import Database

MIGRATION_VERSION_KEY = "migrationVersion"


class SettingsStore:
    """Key-value settings store scoped to one namespace.

    Reads are synchronous; writes commit before returning so that a value
    handed to ``set`` survives a crash immediately afterwards.
    """

    def __init__(self, db: Database, scope: str = "kanka-foundry"):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
            scope: Namespace all keys are stored under.
        """
        self.db = db
        self.scope = scope

    def get(self, key: str) -> str | None:
        """Get a setting value.

        Args:
            key: Setting key.

        Returns:
            The stored value, or None if never set.
        """
        cursor = self.db.execute(
            "SELECT value FROM settings WHERE scope = ? AND key = ?",
            (self.scope, key),
        )
        row = cursor.fetchone()
        return row["value"] if row else None

    async def set(self, key: str, value: str) -> None:
        """Persist a setting value.

        Args:
            key: Setting key.
            value: New value.

        Raises:
            SettingsError: If the write could not be committed.
        """
        now = datetime.now().isoformat()
        try:
            with self.db.transaction() as cursor:
                cursor.execute(
                    """
                    INSERT INTO settings (scope, key, value, updated_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(scope, key)
                    DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                    """,
                    (self.scope, key, value, now),
                )
        except DatabaseError as e:
            raise SettingsError(f"Failed to write setting {key}: {e}") from e

        logger.debug(f"Setting {self.scope}.{key} = {value!r}")

    def all(self) -> dict[str, str]:
        """Get every setting in this scope."""
        cursor = self.db.execute(
            "SELECT key, value FROM settings WHERE scope = ? ORDER BY key",
            (self.scope,),
        )
        return {row["key"]: row["value"] for row in cursor.fetchall()}
