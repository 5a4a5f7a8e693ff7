"""structlog-based logging for uilocator.

Library modules log key/value events through ``get_logger(__name__)``;
output goes through the standard library logging handlers so that host
applications keep control of where it ends up. Logging configures
itself from UILocatorSettings the first time a logger is requested,
and ``setup_logging`` can be called again to override that (the CLI
does so for ``--verbose``).
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, cast

import structlog

# Set to "1" to keep uilocator quiet on stderr when embedded in a host app
DISABLE_CONSOLE_ENV = "UILOCATOR_DISABLE_CONSOLE_LOGGING"

_PLAIN_FORMAT = "%(message)s"


def _processor_chain(
    structured: bool, add_timestamp: bool, add_caller_info: bool, colorize: bool
) -> list[Any]:
    chain: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso", utc=False))
    if add_caller_info:
        chain.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )
    chain += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if structured:
        chain.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=colorize))
    return chain


def _handlers(console: bool, log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    return handlers or [logging.NullHandler()]


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = False,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = False,
    colorize: bool = False,
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also write log lines to this file
        structured: Render events as JSON instead of key=value text
        console: Write to stderr (forced off by UILOCATOR_DISABLE_CONSOLE_LOGGING=1)
        add_timestamp: Prefix events with an ISO timestamp
        add_caller_info: Add module and line number to events
        colorize: Colorize console text output

    Raises:
        ValueError: If level is not a logging level name
    """
    if os.getenv(DISABLE_CONSOLE_ENV) == "1":
        console = False

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=_processor_chain(
            structured, add_timestamp, add_caller_info, colorize and console
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format=_PLAIN_FORMAT,
        level=numeric_level,
        handlers=_handlers(console, log_file),
        force=True,
    )


_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Configure logging from settings on first use."""
    global _logging_initialized

    if _logging_initialized:
        return
    _logging_initialized = True

    from ..config.settings import get_settings

    try:
        settings = get_settings()
        setup_logging(
            level="DEBUG" if settings.debug_mode else settings.log_level,
            log_file=settings.log_file,
            structured=settings.structured_logs,
            add_caller_info=settings.debug_mode,
            colorize=settings.debug_mode,
        )
    except (OSError, ValueError):
        # Bad log level or unwritable log file: keep plain stderr output
        setup_logging()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class QueryLogger:
    """Logs element queries with their outcome and duration.

    Example:
        >>> query_logger = QueryLogger()
        >>> query = query_logger.start("QQMusic", "searchBox")
        >>> query_logger.finish(query, found=True)
    """

    def __init__(self, base_logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize query logger.

        Args:
            base_logger: Logger to emit events on
        """
        self.logger = base_logger or get_logger(__name__)

    def start(self, app_name: str, element_name: str, **kwargs) -> dict[str, Any]:
        """Record the start of a query.

        Returns:
            Query context to pass to finish()
        """
        return {
            "app": app_name,
            "element": element_name,
            "started": time.perf_counter(),
            **kwargs,
        }

    def finish(
        self, query: dict[str, Any], found: bool, error: Exception | None = None
    ) -> float:
        """Log the outcome of a query.

        Args:
            query: Context from start()
            found: Whether a node was returned
            error: Exception the query raised, if any

        Returns:
            Query duration in milliseconds
        """
        context = {key: value for key, value in query.items() if key != "started"}
        duration_ms = round((time.perf_counter() - query["started"]) * 1000, 3)
        context["duration_ms"] = duration_ms

        if error is not None:
            self.logger.error(
                "element_query_failed",
                error=str(error),
                error_type=type(error).__name__,
                **context,
            )
        elif found:
            self.logger.info("element_resolved", **context)
        else:
            self.logger.info("element_not_found", **context)
        return duration_ms
