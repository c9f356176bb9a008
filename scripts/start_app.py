#!/usr/bin/env python3
"""Serve the comments API with uvicorn.

Usage:
    python scripts/start_app.py [--host HOST] [--port PORT] [--migrate]
"""

import argparse
import sys

import logfire
import uvicorn

from ngestream.config import Settings
from ngestream.util.logging import setup_logging
from ngestream.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Upgrade the schema to head before serving",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    # Before uvicorn imports the app, so import errors are reported too
    configure_logfire(settings)

    if args.migrate:
        from run_migrations import migrate

        migrate()

    port = args.port or settings.port
    logfire.info(
        "Starting comments API",
        host=args.host,
        port=port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "ngestream.interface.api.app:app",
            host=args.host,
            port=port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comments API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
