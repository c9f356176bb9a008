"""Standard library logging setup for the API and scripts.

Our own code reports through logfire; this only governs records from
uvicorn, alembic, SQLAlchemy and asyncpg.
"""

import logging
import sys

import logfire

from ngestream.config import Settings

# Chatty at INFO: one record per checkout or protocol message
NOISY_LOGGERS = ("asyncpg", "sqlalchemy.pool", "sqlalchemy.engine")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Level is DEBUG when ``settings.debug`` is set, WARNING in production and
    INFO elsewhere. With a Logfire token configured, records are forwarded
    to Logfire as well as printed.
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.observability.logfire_token:
        handlers.append(logfire.LogfireLoggingHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
