"""Registry of date-versioned migration units.

Units are registered explicitly, through the ``migration`` decorator, or by
importing every module of a Python package. Whatever the source, the
registry hands them out sorted by (version, id), so two units sharing a date
still run in a fixed order.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Callable, Iterator

from loguru import logger

from ..core.exceptions import DuplicateMigrationError, MigrationError
from ..core.types import MigrateFn, MigrationUnit
from ..core.versions import NO_VERSION, extract_version, is_newer_than


class MigrationRegistry:
    """Holds every known migration unit for the lifetime of the process.

    Example:
        registry = MigrationRegistry()

        @registry.migration("2024-08-14-move-kanka-flags")
        async def move_flags() -> None:
            ...

        registry.latest_version()  # "2024-08-14"
    """

    def __init__(self) -> None:
        self._units: dict[str, MigrationUnit] = {}
        self._sorted: list[MigrationUnit] | None = None

    def register(
        self,
        migration_id: str,
        run: MigrateFn,
        description: str | None = None,
    ) -> MigrationUnit:
        """Register a migration unit.

        Args:
            migration_id: Identifying name; must embed a YYYY-MM-DD date.
            run: Zero-argument coroutine function performing the upgrade.
            description: Human-readable description (defaults to the id).

        Returns:
            The registered unit.

        Raises:
            DuplicateMigrationError: If the id is already registered.
            MigrationError: If run is not a coroutine function.
        """
        if migration_id in self._units:
            raise DuplicateMigrationError(migration_id)
        if not inspect.iscoroutinefunction(run):
            raise MigrationError(
                f"Migration {migration_id} must be an async function, got {run!r}"
            )

        version = extract_version(migration_id)
        if version == NO_VERSION:
            logger.warning(
                f"Migration {migration_id} has no YYYY-MM-DD date and will sort first"
            )

        unit = MigrationUnit(
            id=migration_id,
            version=version,
            run=run,
            description=description or migration_id,
        )
        self._units[migration_id] = unit
        self._sorted = None
        return unit

    def migration(
        self, migration_id: str, description: str | None = None
    ) -> Callable[[MigrateFn], MigrateFn]:
        """Decorator form of ``register``."""

        def decorator(fn: MigrateFn) -> MigrateFn:
            self.register(migration_id, fn, description)
            return fn

        return decorator

    @classmethod
    def from_package(cls, package: str | ModuleType) -> "MigrationRegistry":
        """Build a registry from every module in a package.

        A module contributes a unit when it defines ``async def migrate()``.
        Its id is ``MIGRATION_ID`` if set, otherwise the module name with
        underscores turned into dashes (``m2024_07_28_x`` -> ``m2024-07-28-x``).
        ``DESCRIPTION`` is optional.

        Args:
            package: Dotted package name or an imported package.

        Returns:
            A populated registry.
        """
        if isinstance(package, str):
            package = importlib.import_module(package)

        registry = cls()

        for _, modname, ispkg in pkgutil.iter_modules(package.__path__):
            if ispkg:
                continue

            module = importlib.import_module(f"{package.__name__}.{modname}")

            migrate = getattr(module, "migrate", None)
            if migrate is None or not inspect.iscoroutinefunction(migrate):
                logger.warning(f"Skipping invalid migration module: {modname}")
                continue

            migration_id = getattr(module, "MIGRATION_ID", modname.replace("_", "-"))
            registry.register(
                migration_id,
                migrate,
                getattr(module, "DESCRIPTION", None),
            )

        logger.debug(f"Discovered {len(registry)} migration(s) in {package.__name__}")
        return registry

    def all_units_sorted(self) -> list[MigrationUnit]:
        """Get all units sorted by version, then id."""
        if self._sorted is None:
            self._sorted = sorted(self._units.values(), key=lambda u: (u.version, u.id))
        return list(self._sorted)

    def latest_version(self) -> str:
        """Get the newest available version, or "" if the registry is empty."""
        units = self.all_units_sorted()
        return units[-1].version if units else NO_VERSION

    def pending(self, recorded_version: str) -> list[MigrationUnit]:
        """Get units strictly newer than the recorded version, in run order."""
        return [
            u for u in self.all_units_sorted() if is_newer_than(u.version, recorded_version)
        ]

    def get(self, migration_id: str) -> MigrationUnit | None:
        return self._units.get(migration_id)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[MigrationUnit]:
        return iter(self.all_units_sorted())
