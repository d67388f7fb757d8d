from __future__ import annotations

from .config import LoggingConfig, parse_level
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_default_log_path,
    get_logger,
    get_recent_logs,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_default_log_path",
    "get_logger",
    "get_recent_logs",
    "parse_level",
    "shutdown_logging",
]
