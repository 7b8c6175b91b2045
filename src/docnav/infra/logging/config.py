from __future__ import annotations

"""
Logging Configuration Models.

Defines the settings docnav uses to initialize logging and how they are
derived from the persisted 'app_settings' section of config.json.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from docnav.infra.fs import get_default_log_path

DEFAULT_LOG_FILE_NAME = "docnav.log"

# Value of app_settings.log_file that selects the per-user log location
LOG_FILE_DEFAULT_SENTINEL = "default"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for the docnav CLI and for hosts embedding the library.

    Console output stays terse because it shares stderr with CLI error
    messages; the file format carries the logger name so flattener
    warnings (duplicate routes, malformed nodes) can be traced.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path for persistent file storage.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated files to keep.
        console_fmt: Format for terminal output.
        file_fmt: Format for file entries.
        datefmt: Timestamp format.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 1

    console_fmt: str = "docnav: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], *, debug: bool = False) -> "LoggingConfig":
        """
        Build the configuration from the persisted app settings.

        Args:
            settings: The 'app_settings' section ('log_level', 'log_file').
            debug: Force DEBUG regardless of the stored level.

        Returns:
            LoggingConfig: Settings with unknown levels mapped to INFO and
            log_file "default" resolved to the user data directory.
        """
        level = str(settings.get("log_level") or "INFO").strip().upper()
        if level not in _LEVEL_MAP:
            level = "INFO"
        if debug:
            level = "DEBUG"

        log_file = settings.get("log_file") or None
        if log_file == LOG_FILE_DEFAULT_SENTINEL:
            log_file = get_default_log_path(DEFAULT_LOG_FILE_NAME)

        return cls(level=level, console=True, log_file=log_file)
