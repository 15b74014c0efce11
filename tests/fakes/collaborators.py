"""In-memory collaborator fakes for testing.

Each fake implements the corresponding protocol from migrun.app.protocols.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping


@dataclass
class InMemorySettingsStore:
    """Dict-backed settings store.

    Attributes:
        values: Stored settings.
        writes: Every (key, value) passed to set, in order.
        fail_on_value: If set, writing this value raises RuntimeError.
    """

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    fail_on_value: str | None = None

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        if value == self.fail_on_value:
            raise RuntimeError(f"disk full while writing {value}")
        self.writes.append((key, value))
        self.values[key] = value


@dataclass
class FakeRecord:
    """Domain record with namespaced flags."""

    flags: dict[str, dict[str, Any]] = field(default_factory=dict)

    def get_flag(self, scope: str, key: str) -> Any:
        return self.flags.get(scope, {}).get(key)


@dataclass
class InMemoryRecordSource:
    """Record source over a fixed list of records."""

    items: list[FakeRecord] = field(default_factory=list)

    def records(self) -> Iterator[FakeRecord]:
        return iter(self.items)


class FailingRecordSource:
    """Record source whose query always fails."""

    def records(self) -> Iterator[FakeRecord]:
        raise ConnectionError("journal unavailable")


@dataclass
class RecordingNotifier:
    """Notifier that records every call as (level, key, params)."""

    events: list[tuple[str, str, dict[str, str] | None]] = field(default_factory=list)

    def info(self, message_key: str) -> None:
        self.events.append(("info", message_key, None))

    def error(self, message_key: str, params: Mapping[str, str]) -> None:
        self.events.append(("error", message_key, dict(params)))

    @property
    def keys(self) -> list[str]:
        return [key for _, key, _ in self.events]
