"""Logging configuration: loguru for application logs, structlog for pipeline events.

Both write to stderr so stdout stays free for report output
(``verifact analyze --json`` can be piped).
"""

import sys
from typing import Optional

import structlog
from loguru import logger
from structlog.contextvars import merge_contextvars

from verifact.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def _use_console_renderer() -> bool:
    return sys.stderr.isatty() and settings.log_format.lower() == "console"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure loguru from settings.

    Colorized human-readable lines on an interactive terminal with
    LOG_FORMAT=console, serialized JSON records otherwise.

    Args:
        level: Overrides LOG_LEVEL when given
    """
    level = (level or settings.log_level).upper()
    logger.remove()

    if _use_console_renderer():
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,  # no variable values in serialized records
        )

    # CONSOLE_FORMAT reads extra[component]; unbound records need a default
    logger.configure(extra={"component": "verifact"})


def configure_structured_logging() -> None:
    """
    Configure structlog for the event-style logs of the analysis pipeline.

    Uses the console renderer on an interactive terminal with console format,
    the JSON renderer otherwise.
    """
    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if _use_console_renderer():
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str):
    """
    Get a logger instance bound to a specific component name.

    Args:
        component: Component/module name for log context

    Returns:
        Logger instance with component context

    Example:
        >>> log = get_logger("probes.page_signals")
        >>> log.debug("No parseable date found")
    """
    return logger.bind(component=component)


# Configure logging on module import
configure_logging()

__all__ = ["logger", "get_logger", "configure_logging", "configure_structured_logging"]
