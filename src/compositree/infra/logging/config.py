from __future__ import annotations

"""
Logging settings for the compositree CLI.

The CLI only switches between INFO (default) and DEBUG (``--debug``);
the remaining names are accepted so a ``LoggingConfig`` built by library
callers can quieten the tree loader down to warnings or errors.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by ``configure_logging``.

    Unknown level names resolve to INFO. Rotation only applies when
    ``log_file`` is set (``--log-file``); tree renders are small, so the
    default segment size stays modest.

    Attributes:
        level: Level name, one of DEBUG, INFO, WARNING, ERROR.
        console: Send records to stderr. Rendered trees go to stdout, so
            the two streams never interleave.
        log_file: Rotating log file path, or None.
        max_bytes: Segment size before the file rotates.
        backup_count: Rotated segments kept next to ``log_file``.
        console_fmt: stderr record format.
        file_fmt: Log file record format.
        datefmt: Timestamp format for the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 256 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
