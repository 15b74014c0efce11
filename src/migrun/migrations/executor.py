"""Apply pending migrations in version order.

The recorded version is written after every unit that completes, so it
always names the last fully applied migration. A run that stops on an
error resumes from that point next time, re-attempting the failed unit.
"""

from __future__ import annotations

import asyncio

from loguru import logger

from ..app.protocols import NotifierProtocol, SettingsStoreProtocol
from ..core.types import MigrationOutcome, MigrationReport, MigrationStatus
from ..store.settings import MIGRATION_VERSION_KEY
from .bootstrap import BootstrapResolver
from .registry import MigrationRegistry


class MigrationExecutor:
    """Runs pending migrations one at a time.

    Example:
        executor = MigrationExecutor(store, registry, notifier, bootstrap)
        report = await executor.run()
        print(report.outcome, report.version_after)
    """

    def __init__(
        self,
        store: SettingsStoreProtocol,
        registry: MigrationRegistry,
        notifier: NotifierProtocol,
        bootstrap: BootstrapResolver,
    ):
        """Initialize the executor.

        Args:
            store: Settings store holding the recorded version.
            registry: Registry of available migration units.
            notifier: Sink for started/finished/failed notifications.
            bootstrap: Resolver seeding the version on first run.
        """
        self._store = store
        self._registry = registry
        self._notifier = notifier
        self._bootstrap = bootstrap
        self._lock = asyncio.Lock()

    def get_version(self) -> str:
        """Get the recorded migration version ("" if unset)."""
        return self._store.get(MIGRATION_VERSION_KEY) or ""

    def status(self) -> MigrationStatus:
        """Report what run() would apply, without running or writing anything.

        When no version is recorded yet, pending migrations are measured from
        the baseline the bootstrap step would seed.
        """
        recorded = self.get_version()
        effective = recorded or self._bootstrap.baseline()
        return MigrationStatus(
            recorded_version=recorded,
            latest_version=self._registry.latest_version(),
            pending=[u.id for u in self._registry.pending(effective)],
            effective_version=effective,
        )

    async def run(self) -> MigrationReport:
        """Bootstrap if needed, then apply every pending migration.

        Calls are serialised; a call made while another is in flight waits
        for it and then sees the updated version.

        Returns:
            Report describing what was applied.

        Raises:
            Exception: Only if bootstrapping fails. Migration failures are
                reported through the notifier and the returned report.
        """
        async with self._lock:
            await self._bootstrap.resolve()
            return await self._apply_pending()

    async def _apply_pending(self) -> MigrationReport:
        version_before = self.get_version()
        pending = self._registry.pending(version_before)

        if not pending:
            logger.debug(f"Migrations at version {version_before}, nothing to apply")
            return MigrationReport(
                outcome=MigrationOutcome.NOOP,
                version_before=version_before,
                version_after=version_before,
            )

        report = MigrationReport(
            outcome=MigrationOutcome.COMPLETED,
            version_before=version_before,
            version_after=version_before,
        )
        current = None

        try:
            self._notifier.info("migration.started")

            for unit in pending:
                current = unit
                logger.info(f"Executing migration {unit.id}: {unit.description}")
                await unit.run()
                await self._store.set(MIGRATION_VERSION_KEY, unit.version)
                report.applied.append(unit.id)
                report.version_after = unit.version

            current = None
            self._notifier.info("migration.finished")
        except Exception as e:
            failed_id = current.id if current else None
            logger.exception(f"Migration {failed_id} failed: {e}")
            report.outcome = MigrationOutcome.FAILED
            report.failed = failed_id
            report.error = str(e)
            self._notifier.error("migration.failed", {"error": str(e)})
            return report

        logger.info(
            f"Applied {len(report.applied)} migration(s), "
            f"now at version {report.version_after}"
        )
        return report
