"""structlog setup shared by the engine adapters, the store and the UI.

Events are logged as snake_case names with keyword context, e.g.
``log.info("simulation_saved", id=sim.id)``. Output goes to stdout and to
``logs/immocashflow.log``; the file is skipped while pytest runs.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "immocashflow.log"
LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_FILE_BACKUPS = 2

_configured: bool = False


def _handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers

    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(LOG_FILE),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    except OSError as e:
        # Read-only checkout: console only
        sys.stderr.write(f"immocashflow: file logging disabled ({e})\n")
    return handlers


def _processors(json_output: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Set up stdlib logging and structlog once per process.

    Args:
        level: DEBUG, INFO, WARNING or ERROR; ``IMMOCF_LOG_LEVEL`` when omitted
        json_output: JSON lines instead of console text; ``IMMOCF_JSON_LOGS``
            when omitted

    Later calls return the existing logger unchanged.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    if level is None or json_output is None:
        from immocashflow.core.settings import get_settings
        settings = get_settings()
        level = level or settings.log_level
        json_output = settings.json_logs if json_output is None else json_output

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=_handlers(),
        force=True,
    )
    structlog.configure(
        processors=_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Module logger; ``name`` is attached as ``logger_name``."""
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
