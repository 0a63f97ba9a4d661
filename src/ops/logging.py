"""
Logging setup.

Log records go to stderr (and optionally a file) so that crossing events
printed on stdout stay machine-readable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_path: Optional[str], log_level: str) -> None:
    """
    Configure the root logger once for the process.

    Args:
        log_path: Log file path; its directory is created if missing.
            None or "" disables the file handler.
        log_level: Level name, e.g. "INFO" or "DEBUG".
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_path:
        log_dir = os.path.dirname(log_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
