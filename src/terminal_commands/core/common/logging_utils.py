"""
Logging utilities for the terminal command engine.

This module provides:
- Root logger configuration from ``LoggingConfig``
- structlog configuration bridged onto the stdlib logging tree
- Test/production environment tagging
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from terminal_commands.core.config.app_config import LoggingConfig

DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Return 'test' if running under pytest, 'prod' otherwise."""
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def configure_logging(
    config: LoggingConfig | None = None,
    *,
    log_format: str | None = None,
) -> None:
    """Configure stdlib logging and structlog from a logging configuration.

    Args:
        config: Logging configuration; defaults are used when omitted
        log_format: Optional stdlib format string
    """
    from terminal_commands.core.config.app_config import LoggingConfig

    cfg = config or LoggingConfig()
    level = getattr(logging, cfg.level.value, logging.INFO)

    formatter = logging.Formatter(fmt=log_format or DEFAULT_LOG_FORMAT)
    tagging = EnvironmentTaggingFilter()

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler()
    handlers.append(console_handler)
    if cfg.log_file:
        handlers.append(logging.FileHandler(cfg.log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(tagging)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class LogContext:
    """Context manager for adding context to logs."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context: Any):
        self.logger = logger
        self.context = context
        self.bound_logger: structlog.stdlib.BoundLogger | None = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, *args: Any) -> None:
        self.bound_logger = None
