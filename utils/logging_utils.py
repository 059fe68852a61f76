import logging
import os

import structlog
from structlog.stdlib import add_log_level, add_logger_name

LOG_LEVEL_ENV = "BANK_PLACEHOLDERS_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``BANK_PLACEHOLDERS_LOG_LEVEL`` or ``default``."""
    raw = os.getenv(LOG_LEVEL_ENV)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: int | None = None, colors: bool = True, cache_loggers: bool = True
) -> None:
    """Configure structlog and standard logging for the placeholder layer.

    ``level`` defaults to the value resolved from the environment.
    """
    if level is None:
        level = resolve_log_level()
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )
