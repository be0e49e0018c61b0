"""
Structured logging for the adpopcorn adapter.

Log lines are rendered by structlog as JSON, or as console output when
LOG_FORMAT=console. Lines emitted while the adapter works on an auction
carry that auction's identifiers.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator

import structlog

SERVICE_NAME = "adpopcorn"

# Host auction fields bound onto log lines, keyed by host name
AUCTION_CONTEXT_FIELDS = {
    "auctionId": "auction_id",
    "bidderRequestId": "bidder_request_id",
}


def add_service_name(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor tagging entries with the adapter's service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _renderer(log_format: str) -> structlog.typing.Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.processors.JSONRenderer(sort_keys=True)


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for the adapter.

    Args:
        level: Log level name; LOG_LEVEL or INFO when omitted
        log_format: 'json' or 'console'; LOG_FORMAT or json when omitted
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (log_format or os.getenv("LOG_FORMAT", "json")).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def adapter_logger(bidder_code: str) -> structlog.stdlib.BoundLogger:
    """Logger for bid adapter events, bound to the bidder code."""
    return get_logger("adpopcorn.adapter").bind(bidder=bidder_code)


def config_logger() -> structlog.stdlib.BoundLogger:
    """Logger for configuration loading."""
    return get_logger("adpopcorn.config")


@contextmanager
def auction_context(bidder_request: dict[str, Any] | None) -> Iterator[dict[str, Any]]:
    """
    Bind the host's auction identifiers for the duration of a block.

    Only identifiers present on the bidder request are bound; the previous
    context is restored on exit.

    Yields:
        The bound fields
    """
    bidder_request = bidder_request or {}
    bound = {
        field: bidder_request[key]
        for key, field in AUCTION_CONTEXT_FIELDS.items()
        if bidder_request.get(key)
    }
    with structlog.contextvars.bound_contextvars(**bound):
        yield bound


def log_operation(logger: structlog.stdlib.BoundLogger, operation: str | None = None):
    """
    Decorator timing an adapter operation.

    Completion is logged at debug level; a failure is logged at error level
    and re-raised.

    Args:
        logger: Logger to report to
        operation: Name to report (the function name when omitted)
    """
    def decorator(func: Callable) -> Callable:
        name = operation or func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    "Adapter operation failed",
                    operation=name,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    error=str(e),
                    exc_info=True,
                )
                raise
            logger.debug(
                "Adapter operation completed",
                operation=name,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return result
        return wrapper
    return decorator


configure_logging()
