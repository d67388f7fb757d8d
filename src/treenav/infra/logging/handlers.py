from __future__ import annotations

"""
Logging Handler Factories.

Builds the handlers attached behind the queue listener and tags each of
them, so reconfiguration only removes handlers created by this package.
"""

import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, RotatingFileHandler
from typing import Optional

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_treenav_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as managed by this package and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Build the stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return tag_handler(sh)


def create_ui_handler(ui_queue: queue.Queue, level_int: int) -> logging.Handler:
    """
    Build a handler forwarding records to an on-screen console queue.

    The GUI drains the queue from its event loop; formatting happens there.
    """
    qh = QueueHandler(ui_queue)
    qh.setLevel(level_int)
    return tag_handler(qh)


def create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Formatter applied to each entry.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Configured handler, or None if the
        file cannot be opened (reported on stderr).
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    tag_handler(fh)
    return fh
