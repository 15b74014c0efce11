"""Database schema definitions for migrun."""

SCHEMA_SQL = """\
-- Namespaced key-value settings
CREATE TABLE IF NOT EXISTS settings (
    scope TEXT NOT NULL,
    key TEXT NOT NULL,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    PRIMARY KEY (scope, key)
);

-- Journal entries with JSON-encoded flags
CREATE TABLE IF NOT EXISTS journal_entries (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    flags_json TEXT NOT NULL DEFAULT '{}',
    created_at TEXT NOT NULL
);
"""


def get_schema() -> str:
    """Get the full database schema SQL."""
    return SCHEMA_SQL
