"""User-visible notifications for migration runs.

Messages are looked up by key in a per-locale catalog and interpolated
with ``str.format`` style placeholders. Unknown locales fall back to
English; unknown keys are shown verbatim.
"""

from __future__ import annotations

from typing import Mapping

from loguru import logger

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "migration.started": "Migrating stored data to the current version. Please wait.",
        "migration.finished": "Data migration finished.",
        "migration.failed": "Data migration failed: {error}",
    },
    "de": {
        "migration.started": "Gespeicherte Daten werden migriert. Bitte warten.",
        "migration.finished": "Datenmigration abgeschlossen.",
        "migration.failed": "Datenmigration fehlgeschlagen: {error}",
    },
}


def get_message(
    key: str,
    params: Mapping[str, str] | None = None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Resolve a message key to localised text.

    Args:
        key: Message key, e.g. "migration.failed".
        params: Values for placeholders in the message.
        locale: Preferred locale.

    Returns:
        The formatted message.
    """
    catalog = MESSAGES.get(locale, {})
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key) or key
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        logger.warning(f"Missing placeholder values for message {key!r}")
        return template


class LoggingNotifier:
    """Notifier that writes localised messages to the log."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale

    def info(self, message_key: str) -> None:
        logger.info(get_message(message_key, locale=self.locale))

    def error(self, message_key: str, params: Mapping[str, str]) -> None:
        logger.error(get_message(message_key, params, locale=self.locale))
