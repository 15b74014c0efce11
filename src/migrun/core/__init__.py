"""Core types, configuration and exceptions for migrun."""

from .config import Config
from .exceptions import MigrationError, MigrunError
from .types import MigrationOutcome, MigrationReport, MigrationStatus, MigrationUnit

__all__ = [
    "Config",
    "MigrationError",
    "MigrationOutcome",
    "MigrationReport",
    "MigrationStatus",
    "MigrationUnit",
    "MigrunError",
]
