"""Migration version modules.

Each module in this package represents one migration. Modules must define:
    migrate(): async function that applies the migration, no arguments

and may define:
    MIGRATION_ID: str - identifying name embedding a YYYY-MM-DD date
        (defaults to the module name with "_" replaced by "-")
    DESCRIPTION: str - Human-readable description

Migrations must be safe to run twice: if recording the version fails after
migrate() returned, the migration is attempted again on the next run.

Example migration (m2024_08_14_move_flags.py):
    DESCRIPTION = "Move sync flags to the new scope"

    async def migrate():
        ...
"""
