"""Run command for migrun CLI."""

import asyncio

from ...core.config import Config
from ...core.exceptions import MigrationError
from ...core.types import MigrationOutcome, MigrationReport
from ...services import ServiceContainer


def handle_run(args, config: Config) -> None:
    """Handle run command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Raises:
        MigrationError: If a migration failed.
    """
    report = asyncio.run(_handle_run_async(config))
    _print_report(report)

    if report.outcome is MigrationOutcome.FAILED:
        raise MigrationError(f"Migration {report.failed} failed: {report.error}")


async def _handle_run_async(config: Config) -> MigrationReport:
    async with ServiceContainer(config) as services:
        return await services.executor.run()


def _print_report(report: MigrationReport) -> None:
    if report.outcome is MigrationOutcome.NOOP:
        print(f"Up to date at version {report.version_after or '(none)'}")
        return

    for migration_id in report.applied:
        print(f"  ✓ {migration_id}")
    if report.failed:
        print(f"  ✗ {report.failed}")
    print(f"Version: {report.version_before or '(none)'} -> {report.version_after}")
