from __future__ import annotations

from .config import LEVEL_NAMES, LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_default_gui_log_path,
    get_logger,
    get_recent_logs,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LEVEL_NAMES",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "get_recent_logs",
    "get_default_gui_log_path",
]
