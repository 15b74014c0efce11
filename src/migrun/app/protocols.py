"""Protocol definitions for migrun collaborators.

The migration core never touches a concrete storage engine or UI. It
depends on three narrow interfaces, injected at construction time:

- SettingsStoreProtocol: durable key-value slot for the recorded version
- RecordSourceProtocol: existing domain records, inspected once at bootstrap
- NotifierProtocol: fire-and-forget user notifications, localised by key

Example:
    executor = MigrationExecutor(
        store=settings_store,
        registry=registry,
        notifier=notifier,
        bootstrap=BootstrapResolver(settings_store, journal, registry),
    )
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SettingsStoreProtocol(Protocol):
    """Protocol for the persistent settings store."""

    def get(self, key: str) -> str | None:
        """Get a setting value, or None if it was never set."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Durably persist a setting value."""
        ...


@runtime_checkable
class FlaggedRecord(Protocol):
    """A persisted domain record that may carry namespaced flags."""

    def get_flag(self, scope: str, key: str) -> Any:
        """Get a flag value, or None if unset."""
        ...


@runtime_checkable
class RecordSourceProtocol(Protocol):
    """Protocol for enumerating existing domain records."""

    def records(self) -> Iterable[FlaggedRecord]:
        """Iterate over all persisted records."""
        ...


@runtime_checkable
class NotifierProtocol(Protocol):
    """Protocol for user-visible notifications."""

    def info(self, message_key: str) -> None:
        """Show an informational message."""
        ...

    def error(self, message_key: str, params: Mapping[str, str]) -> None:
        """Show an error message with interpolation params."""
        ...
