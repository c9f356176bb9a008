#!/usr/bin/env python3
"""Apply (or roll back) the comment store schema.

Usage:
    python scripts/run_migrations.py [revision] [--downgrade] [--sql]
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from ngestream.config import Settings
from ngestream.util.logging import setup_logging
from ngestream.util.observability import configure_logfire


def migrate(revision: str = "head", downgrade: bool = False, sql: bool = False) -> None:
    """Move the schema to ``revision``; failures are reported and re-raised."""
    alembic_cfg = Config("alembic.ini")
    direction = "downgrade" if downgrade else "upgrade"

    with logfire.span("Running migrations", revision=revision, direction=direction):
        try:
            if downgrade:
                command.downgrade(alembic_cfg, revision, sql=sql)
            else:
                command.upgrade(alembic_cfg, revision, sql=sql)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                direction=direction,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must not continue on a half-migrated schema
            raise


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--downgrade", action="store_true")
    parser.add_argument(
        "--sql", action="store_true", help="Print the SQL instead of executing it"
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if args.downgrade and args.revision == "head":
        parser.error("a target revision is required with --downgrade")

    migrate(args.revision, downgrade=args.downgrade, sql=args.sql)
    return 0


if __name__ == "__main__":
    sys.exit(main())
