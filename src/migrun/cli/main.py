"""CLI entry point for migrun."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="migrun",
        description="Apply date-versioned migrations to a stored installation",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="TOML config file (default: $MIGRUN_CONFIG)",
    )
    parser.add_argument("--db", type=Path, help="Settings database path")
    parser.add_argument(
        "-p",
        "--package",
        help="Python package to discover migrations in",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("run", help="Apply pending migrations")
    subparsers.add_parser("status", help="Show recorded and latest versions")
    subparsers.add_parser("list", help="List available migrations")

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build configuration from file/env, then command-line overrides."""
    config = Config.from_env_or_file(args.config)
    if args.db:
        config.db_path = args.db
    if args.package:
        config.migrations_package = args.package
    return config


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)

        if args.command == "run":
            commands.handle_run(args, config)
        elif args.command == "status":
            commands.handle_status(args, config)
        elif args.command == "list":
            commands.handle_list(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
