"""Logging configuration using structlog.

Logs go to stderr to keep stdout clean for data output (piping). Inside
Lambda or any CloudWatch-shipped process, JSON lines are easier to query
than the console renderer, so both are available.
"""

import logging
import sys
from typing import Any

import structlog

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _LazyStderrFactory:
    """Resolve sys.stderr at logger creation time, not at configure() time.

    PrintLoggerFactory(file=sys.stderr) captures the file handle once, which
    goes stale under CliRunner when stderr is swapped between invocations.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def setup_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Configure structlog for data-api-client.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        json_logs: Render one JSON object per line instead of console output.
    """
    log_level = "debug" if verbose else "info"

    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS[log_level]),
        context_class=dict,
        logger_factory=_LazyStderrFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, optionally bound with a name.

    Call this inside functions, after setup_logging(), never at module level.
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
