"""Application-level interfaces for migrun."""

from .protocols import (
    FlaggedRecord,
    NotifierProtocol,
    RecordSourceProtocol,
    SettingsStoreProtocol,
)

__all__ = [
    "FlaggedRecord",
    "NotifierProtocol",
    "RecordSourceProtocol",
    "SettingsStoreProtocol",
]
