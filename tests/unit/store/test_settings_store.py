"""Tests for the SQLite settings store."""

from pathlib import Path

import pytest

from migrun.core.exceptions import DatabaseError, SettingsError
from migrun.store.database import Database
from migrun.store.settings import MIGRATION_VERSION_KEY, SettingsStore


class TestSettingsStore:
    """Tests for SettingsStore."""

    def test_get_missing_returns_none(self, settings_store: SettingsStore):
        """Unset keys read as None."""
        assert settings_store.get(MIGRATION_VERSION_KEY) is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, settings_store: SettingsStore):
        """A written value is read back."""
        await settings_store.set(MIGRATION_VERSION_KEY, "2024-07-28")

        assert settings_store.get(MIGRATION_VERSION_KEY) == "2024-07-28"

    @pytest.mark.asyncio
    async def test_set_overwrites(self, settings_store: SettingsStore):
        """Writing a key twice keeps the latest value."""
        await settings_store.set(MIGRATION_VERSION_KEY, "2024-07-28")
        await settings_store.set(MIGRATION_VERSION_KEY, "2024-08-14")

        assert settings_store.get(MIGRATION_VERSION_KEY) == "2024-08-14"
        assert settings_store.all() == {MIGRATION_VERSION_KEY: "2024-08-14"}

    @pytest.mark.asyncio
    async def test_scopes_are_isolated(self, db: Database):
        """Keys in one scope are invisible to another."""
        ours = SettingsStore(db, scope="kanka-foundry")
        theirs = SettingsStore(db, scope="other-module")

        await ours.set(MIGRATION_VERSION_KEY, "2024-07-28")

        assert theirs.get(MIGRATION_VERSION_KEY) is None

    @pytest.mark.asyncio
    async def test_value_persists_across_connections(self, test_db_path: Path):
        """A committed value survives reopening the database."""
        db1 = Database(test_db_path)
        db1.connect()
        await SettingsStore(db1).set(MIGRATION_VERSION_KEY, "2024-08-14")
        db1.close()

        db2 = Database(test_db_path)
        db2.connect()
        assert SettingsStore(db2).get(MIGRATION_VERSION_KEY) == "2024-08-14"
        db2.close()

    @pytest.mark.asyncio
    async def test_set_on_closed_database_raises(self, test_db_path: Path):
        """Write failures surface as SettingsError."""
        db = Database(test_db_path)
        store = SettingsStore(db)

        with pytest.raises(SettingsError):
            await store.set(MIGRATION_VERSION_KEY, "2024-08-14")

    def test_get_on_closed_database_raises(self, test_db_path: Path):
        """Reads without a connection raise DatabaseError."""
        store = SettingsStore(Database(test_db_path))

        with pytest.raises(DatabaseError):
            store.get(MIGRATION_VERSION_KEY)
