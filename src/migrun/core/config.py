"""Configuration management for migrun."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError


@dataclass
class LegacyConfig:
    """How to recognise installations that predate version tracking."""

    # Last migration version that existed before tracking was introduced
    version: str = "2024-07-28"
    # Flag scope and key marking records created by older releases
    flag_scope: str = "kanka-foundry"
    flag_key: str = "id"


@dataclass
class NotificationConfig:
    """Notification sink configuration."""

    locale: str = "en"


def _default_db_path() -> Path:
    """Get default settings database path."""
    data_dir = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return data_dir / "migrun" / "settings.db"


def _section(data: dict, name: str, path: Path) -> dict:
    """Get a TOML table, raising ConfigError if the key holds anything else."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] in {path} must be a table")
    return section


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    scope: str = "kanka-foundry"  # Settings namespace
    migrations_package: str = "migrun.migrations.versions"
    legacy: LegacyConfig = field(default_factory=LegacyConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config {path}: {e}") from e

        config = cls()

        if db_path := data.get("db_path"):
            config.db_path = Path(db_path)
        if scope := data.get("scope"):
            config.scope = scope
        if package := data.get("migrations_package"):
            config.migrations_package = package

        legacy = _section(data, "legacy", path)
        config.legacy.version = legacy.get("version", config.legacy.version)
        config.legacy.flag_scope = legacy.get("flag_scope", config.legacy.flag_scope)
        config.legacy.flag_key = legacy.get("flag_key", config.legacy.flag_key)

        notifications = _section(data, "notifications", path)
        config.notifications.locale = notifications.get(
            "locale", config.notifications.locale
        )

        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | None = None) -> "Config":
        """Load from an explicit file, $MIGRUN_CONFIG, or the environment only."""
        if path is None and (env_path := os.environ.get("MIGRUN_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> None:
        if path := os.environ.get("MIGRUN_DB_PATH"):
            self.db_path = Path(path)

        if scope := os.environ.get("MIGRUN_SCOPE"):
            self.scope = scope

        if package := os.environ.get("MIGRUN_PACKAGE"):
            self.migrations_package = package

        if version := os.environ.get("MIGRUN_LEGACY_VERSION"):
            self.legacy.version = version

        if locale := os.environ.get("MIGRUN_LOCALE"):
            self.notifications.locale = locale
