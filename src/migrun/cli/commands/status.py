"""Status and list commands for migrun CLI."""

import asyncio

from ...core.config import Config
from ...core.versions import is_newer_than
from ...services import ServiceContainer


def handle_status(args, config: Config) -> None:
    """Handle status command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    asyncio.run(_handle_status_async(config))


async def _handle_status_async(config: Config) -> None:
    async with ServiceContainer(config) as services:
        status = services.executor.status()

    print("Migration Status")
    print("=" * 50)
    print(f"Database: {config.db_path}")
    if status.recorded_version:
        print(f"Recorded: {status.recorded_version}")
    else:
        print(f"Recorded: (none, first run starts at {status.effective_version or '(none)'})")
    print(f"Latest:   {status.latest_version or '(none)'}")
    print()

    if status.is_up_to_date:
        print("No pending migrations.")
    else:
        print("Pending:")
        for migration_id in status.pending:
            print(f"  • {migration_id}")


def handle_list(args, config: Config) -> None:
    """Handle list command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    asyncio.run(_handle_list_async(config))


async def _handle_list_async(config: Config) -> None:
    async with ServiceContainer(config) as services:
        since = services.executor.status().effective_version
        units = services.registry.all_units_sorted()

    if not units:
        print(f"No migrations found in {config.migrations_package}")
        return

    for unit in units:
        marker = "pending" if is_newer_than(unit.version, since) else "applied"
        line = f"{unit.version or '----------'}  {marker:8}  {unit.id}"
        if unit.description != unit.id:
            line += f"  ({unit.description})"
        print(line)
