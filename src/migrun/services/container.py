"""Service container for dependency injection and lifecycle management."""

from __future__ import annotations

from loguru import logger

from ..app.protocols import NotifierProtocol
from ..core.config import Config
from ..migrations.bootstrap import BootstrapResolver
from ..migrations.executor import MigrationExecutor
from ..migrations.registry import MigrationRegistry
from ..notifications import LoggingNotifier
from ..store.database import Database
from ..store.journal import JournalRepository
from ..store.settings import SettingsStore


class ServiceContainer:
    """Wires the migration runner to its SQLite collaborators.

    Components are created lazily on first access. The registry is built
    from ``config.migrations_package`` unless one is passed in.

    Usage as context manager (recommended):

        async with ServiceContainer(config) as services:
            report = await services.executor.run()

    Attributes:
        config: Application configuration.
        db: Database instance (connected after connect() or __aenter__).
    """

    def __init__(
        self,
        config: Config,
        registry: MigrationRegistry | None = None,
        notifier: NotifierProtocol | None = None,
    ):
        """Initialize container with configuration.

        Args:
            config: Application configuration.
            registry: Registry to use instead of discovering one.
            notifier: Notification sink (defaults to LoggingNotifier).
        """
        self.config = config
        self.db = Database(config.db_path)
        self._connected = False

        self._registry = registry
        self._notifier = notifier
        self._settings: SettingsStore | None = None
        self._journal: JournalRepository | None = None
        self._bootstrap: BootstrapResolver | None = None
        self._executor: MigrationExecutor | None = None

    def connect(self) -> None:
        """Connect to database.

        Must be called before accessing components unless using
        the async context manager.
        """
        if not self._connected:
            self.db.connect()
            self._connected = True
            logger.debug("ServiceContainer connected to database")

    async def close(self) -> None:
        """Close all connections and release resources."""
        if self._connected:
            self.db.close()
            self._connected = False
            logger.debug("ServiceContainer closed")

    async def __aenter__(self) -> "ServiceContainer":
        """Async context manager entry."""
        self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def settings(self) -> SettingsStore:
        """Get or create SettingsStore."""
        if self._settings is None:
            self._settings = SettingsStore(self.db, scope=self.config.scope)
        return self._settings

    @property
    def journal(self) -> JournalRepository:
        """Get or create JournalRepository."""
        if self._journal is None:
            self._journal = JournalRepository(self.db)
        return self._journal

    @property
    def registry(self) -> MigrationRegistry:
        """Get or discover the MigrationRegistry."""
        if self._registry is None:
            self._registry = MigrationRegistry.from_package(self.config.migrations_package)
        return self._registry

    @property
    def notifier(self) -> NotifierProtocol:
        """Get or create the notifier."""
        if self._notifier is None:
            self._notifier = LoggingNotifier(locale=self.config.notifications.locale)
        return self._notifier

    @property
    def bootstrap(self) -> BootstrapResolver:
        """Get or create BootstrapResolver."""
        if self._bootstrap is None:
            legacy = self.config.legacy
            self._bootstrap = BootstrapResolver(
                self.settings,
                self.journal,
                self.registry,
                legacy_version=legacy.version,
                flag_scope=legacy.flag_scope,
                flag_key=legacy.flag_key,
            )
        return self._bootstrap

    @property
    def executor(self) -> MigrationExecutor:
        """Get or create MigrationExecutor."""
        if self._executor is None:
            self._executor = MigrationExecutor(
                self.settings,
                self.registry,
                self.notifier,
                self.bootstrap,
            )
        return self._executor
