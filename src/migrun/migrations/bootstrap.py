"""Seed the recorded migration version on first run."""

from __future__ import annotations

from loguru import logger

from ..app.protocols import RecordSourceProtocol, SettingsStoreProtocol
from ..core.exceptions import InvalidVersionError
from ..core.versions import is_valid_version
from ..store.settings import MIGRATION_VERSION_KEY
from .registry import MigrationRegistry

# Last migration version that existed before the version setting was introduced
LEGACY_BASELINE_VERSION = "2024-07-28"


class BootstrapResolver:
    """Decides the baseline version when none has ever been recorded.

    A fresh install has nothing to migrate, so it is marked as already at
    the newest version. An install that already holds records flagged by an
    older release is marked at the legacy baseline, so every migration
    written after it still runs.
    """

    def __init__(
        self,
        store: SettingsStoreProtocol,
        records: RecordSourceProtocol,
        registry: MigrationRegistry,
        legacy_version: str = LEGACY_BASELINE_VERSION,
        flag_scope: str = "kanka-foundry",
        flag_key: str = "id",
    ):
        """Initialize the resolver.

        Args:
            store: Settings store holding the recorded version.
            records: Existing domain records to inspect.
            registry: Registry providing the latest version.
            legacy_version: Baseline for installs that predate tracking.
            flag_scope: Scope of the legacy marker flag.
            flag_key: Key of the legacy marker flag.

        Raises:
            InvalidVersionError: If legacy_version is not YYYY-MM-DD.
        """
        if not is_valid_version(legacy_version):
            raise InvalidVersionError(
                f"Legacy baseline must be YYYY-MM-DD, got {legacy_version!r}"
            )
        self._store = store
        self._records = records
        self._registry = registry
        self.legacy_version = legacy_version
        self.flag_scope = flag_scope
        self.flag_key = flag_key

    def has_legacy_content(self) -> bool:
        """Check whether any existing record carries the legacy marker."""
        return any(
            record.get_flag(self.flag_scope, self.flag_key)
            for record in self._records.records()
        )

    def baseline(self) -> str:
        """Get the version an unrecorded installation would be seeded with.

        Nothing is written.
        """
        if self.has_legacy_content():
            logger.debug("Existing data predates version tracking")
            return self.legacy_version
        return self._registry.latest_version()

    async def resolve(self) -> str | None:
        """Seed the recorded version if it is empty.

        Returns:
            The version written, or None if one was already recorded.
        """
        if self._store.get(MIGRATION_VERSION_KEY):
            return None

        version = self.baseline()
        logger.info(f"No migration version recorded, seeding {version!r}")

        await self._store.set(MIGRATION_VERSION_KEY, version)
        return version
