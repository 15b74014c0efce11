"""Pytest configuration and fixtures."""

import importlib
from pathlib import Path

import pytest

from migrun.core.config import Config
from migrun.migrations import BootstrapResolver, MigrationExecutor, MigrationRegistry
from migrun.store.database import Database
from migrun.store.journal import JournalRepository
from migrun.store.settings import SettingsStore
from tests.fakes import (
    CallLog,
    InMemoryRecordSource,
    InMemorySettingsStore,
    RecordingNotifier,
)


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "settings.db"


@pytest.fixture
def config(test_db_path: Path) -> Config:
    """Provide a Config instance pointing at the temporary database."""
    cfg = Config()
    cfg.db_path = test_db_path
    return cfg


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def settings_store(db: Database) -> SettingsStore:
    """Provide a SettingsStore instance."""
    return SettingsStore(db)


@pytest.fixture
def journal_repo(db: Database) -> JournalRepository:
    """Provide a JournalRepository instance."""
    return JournalRepository(db)


@pytest.fixture
def store() -> InMemorySettingsStore:
    """Provide an in-memory settings store."""
    return InMemorySettingsStore()


@pytest.fixture
def records() -> InMemoryRecordSource:
    """Provide an empty in-memory record source."""
    return InMemoryRecordSource()


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Provide a notifier that records calls."""
    return RecordingNotifier()


@pytest.fixture
def call_log() -> CallLog:
    """Provide a shared migration call log."""
    return CallLog()


@pytest.fixture
def registry() -> MigrationRegistry:
    """Provide an empty registry."""
    return MigrationRegistry()


@pytest.fixture
def bootstrap(store, records, registry) -> BootstrapResolver:
    """Provide a BootstrapResolver over the in-memory fakes."""
    return BootstrapResolver(store, records, registry)


@pytest.fixture
def executor(store, registry, notifier, bootstrap) -> MigrationExecutor:
    """Provide a MigrationExecutor over the in-memory fakes."""
    return MigrationExecutor(store, registry, notifier, bootstrap)


@pytest.fixture
def make_package(tmp_path: Path, monkeypatch):
    """Create an importable migrations package from {module: source}."""

    def _make(modules: dict[str, str]) -> str:
        name = f"pkg_{tmp_path.name}"
        pkg_dir = tmp_path / name
        pkg_dir.mkdir()
        (pkg_dir / "__init__.py").write_text('"""Test migrations."""\n')
        for module, source in modules.items():
            (pkg_dir / f"{module}.py").write_text(source)
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        return name

    return _make
