from __future__ import annotations

"""
Logging Configuration Models.

Defines the configuration dataclass used to initialize the logging
subsystem, the mapping from level names to logging constants and the
translation from an editor session config to a logging setup.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging setup.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Optional path of the persistent log.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
        console_fmt: Format for terminal output.
        file_fmt: Format for file entries.
        datefmt: Timestamp format.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_session(cls, session: Mapping[str, Any], default_log_file: Optional[str] = None) -> LoggingConfig:
        """
        Build the logging setup for a validated session config.

        Args:
            session: Config holding 'log_level' and 'log_to_file'.
            default_log_file: Log path used when 'log_to_file' is on.

        Returns:
            LoggingConfig: Console logging plus the file when enabled.
        """
        log_file = default_log_file if session.get("log_to_file", False) else None
        return cls(level=str(session.get("log_level", "INFO")), console=True, log_file=log_file)
