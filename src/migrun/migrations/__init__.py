"""Date-versioned migrations.

Example:
    from migrun.migrations import BootstrapResolver, MigrationExecutor, MigrationRegistry

    registry = MigrationRegistry.from_package("myapp.migrations")
    bootstrap = BootstrapResolver(store, journal, registry)
    executor = MigrationExecutor(store, registry, notifier, bootstrap)
    report = await executor.run()
"""

from .bootstrap import LEGACY_BASELINE_VERSION, BootstrapResolver
from .executor import MigrationExecutor
from .registry import MigrationRegistry

__all__ = [
    "BootstrapResolver",
    "LEGACY_BASELINE_VERSION",
    "MigrationExecutor",
    "MigrationRegistry",
]
