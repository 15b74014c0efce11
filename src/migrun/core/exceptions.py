"""Custom exceptions for migrun."""


class MigrunError(Exception):
    """Base exception for all migrun errors."""

    pass


class ConfigError(MigrunError):
    """Configuration could not be loaded."""

    pass


class DatabaseError(MigrunError):
    """Database operation failed."""

    pass


class SettingsError(MigrunError):
    """Settings store operation failed."""

    pass


class MigrationError(MigrunError):
    """Migration registration or execution failed."""

    pass


class DuplicateMigrationError(MigrationError):
    """A migration with the same id is already registered."""

    def __init__(self, migration_id: str):
        """Initialize exception with the conflicting id.

        Args:
            migration_id: Identifier that was registered twice.
        """
        self.migration_id = migration_id
        super().__init__(f"Migration already registered: {migration_id}")


class InvalidVersionError(MigrationError):
    """Version string is not a YYYY-MM-DD identifier."""

    pass
