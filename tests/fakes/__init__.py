"""Test fakes for testing without real infrastructure.

This module provides in-memory implementations of the migration
collaborators: settings store, record source and notifier, plus a
factory for migration units that record their invocations.

Example:
    from tests.fakes import InMemorySettingsStore, RecordingNotifier

    store = InMemorySettingsStore()
    notifier = RecordingNotifier()
    executor = MigrationExecutor(store, registry, notifier, bootstrap)
"""

from .collaborators import (
    FakeRecord,
    FailingRecordSource,
    InMemoryRecordSource,
    InMemorySettingsStore,
    RecordingNotifier,
)
from .migrations import CallLog, make_migration

__all__ = [
    "CallLog",
    "FakeRecord",
    "FailingRecordSource",
    "InMemoryRecordSource",
    "InMemorySettingsStore",
    "RecordingNotifier",
    "make_migration",
]
