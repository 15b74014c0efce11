"""SQLite-backed reference collaborators for migrun."""

from .database import Database
from .journal import JournalEntry, JournalRepository
from .settings import MIGRATION_VERSION_KEY, SettingsStore

__all__ = [
    "Database",
    "JournalEntry",
    "JournalRepository",
    "MIGRATION_VERSION_KEY",
    "SettingsStore",
]
