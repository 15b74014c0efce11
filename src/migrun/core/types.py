"""Type definitions for migrun."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Optional

MigrateFn = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class MigrationUnit:
    """A single registered upgrade step."""

    id: str
    version: str
    run: MigrateFn = field(compare=False)
    description: str = ""

    def __repr__(self) -> str:
        return f"MigrationUnit({self.id!r}, version={self.version!r})"


class MigrationOutcome(Enum):
    """Terminal state of one executor run."""

    NOOP = "noop"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class MigrationReport:
    """Result of one executor run."""

    outcome: MigrationOutcome
    version_before: str
    version_after: str
    applied: list[str] = field(default_factory=list)
    failed: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is not MigrationOutcome.FAILED


@dataclass
class MigrationStatus:
    """Snapshot of the recorded version against the registry."""

    recorded_version: str
    latest_version: str
    pending: list[str] = field(default_factory=list)
    # Version pending is measured from; the bootstrap baseline when nothing is recorded
    effective_version: str = ""

    @property
    def is_up_to_date(self) -> bool:
        return not self.pending
