"""Journal entry storage.

Journal entries are the domain records whose flags tell the bootstrap step
whether an installation already holds content from before migration
tracking existed.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator

from .database import Database


@dataclass
class JournalEntry:
    """A stored journal entry."""

    id: str
    name: str
    flags: dict[str, dict[str, Any]] = field(default_factory=dict)

    def get_flag(self, scope: str, key: str) -> Any:
        """Get a namespaced flag value, or None if unset."""
        return self.flags.get(scope, {}).get(key)


class JournalRepository:
    """Repository for journal entries."""

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def add(self, entry: JournalEntry) -> JournalEntry:
        """Insert or replace a journal entry.

        Args:
            entry: Entry to store.

        Returns:
            The stored entry.
        """
        with self.db.transaction() as cursor:
            cursor.execute(
                """
                INSERT OR REPLACE INTO journal_entries (id, name, flags_json, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (entry.id, entry.name, json.dumps(entry.flags), datetime.now().isoformat()),
            )
        return entry

    def get(self, entry_id: str) -> JournalEntry | None:
        """Get a journal entry by ID."""
        cursor = self.db.execute(
            "SELECT * FROM journal_entries WHERE id = ?", (entry_id,)
        )
        row = cursor.fetchone()
        return self._row_to_entry(row) if row else None

    def records(self) -> Iterator[JournalEntry]:
        """Iterate over all journal entries in insertion order."""
        cursor = self.db.execute("SELECT * FROM journal_entries ORDER BY rowid")
        for row in cursor:
            yield self._row_to_entry(row)

    def count(self) -> int:
        """Count stored journal entries."""
        cursor = self.db.execute("SELECT COUNT(*) FROM journal_entries")
        return cursor.fetchone()[0]

    def _row_to_entry(self, row) -> JournalEntry:
        return JournalEntry(
            id=row["id"],
            name=row["name"],
            flags=json.loads(row["flags_json"]),
        )
