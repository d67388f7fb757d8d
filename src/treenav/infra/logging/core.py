from __future__ import annotations

"""
Logging Core Orchestrator.

Configures the root logger once per process. Records are pushed onto a
queue and written by a QueueListener thread, so file output never stalls
the Tk event loop while the tree is being redrawn.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from treenav.infra.fs import get_user_data_dir
from treenav.infra.logging.config import LoggingConfig, parse_level
from treenav.infra.logging.handlers import (
    create_console_handler,
    create_rotating_file_handler,
    create_ui_handler,
    is_our_handler,
    tag_handler,
)

# Root logger attributes tracking our configuration
_CONFIGURED_FLAG_ATTR: str = "_treenav_configured"
_QUEUE_LISTENER_ATTR: str = "_treenav_queue_listener"

LOG_FILE_NAME = "treenav.log"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = LOG_FILE_NAME) -> str:
    """Return the log file path inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger behind a QueueHandler/QueueListener pair.

    Repeated calls are no-ops unless force is set, in which case the
    handlers created by a previous call are detached and closed first.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = parse_level(cfg.level)
        root.setLevel(level_int)
        shutdown_logging()

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            handlers_list.append(
                create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
            )

        if cfg.log_file:
            fh = create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        # The UI sink is already a queue; it bypasses the listener thread.
        if cfg.ui_queue is not None:
            root.addHandler(create_ui_handler(cfg.ui_queue, level_int))

        if handlers_list:
            log_queue: queue.Queue = queue.Queue(-1)
            root.addHandler(tag_handler(QueueHandler(log_queue)))

            listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
            listener.start()
            setattr(root, _QUEUE_LISTENER_ATTR, listener)
            atexit.register(_stop_listener, listener)

        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        return root

    # Emergency console logging if the infrastructure cannot be built
    except Exception:
        fallback = logging.StreamHandler(sys.stderr)
        fallback.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        root.addHandler(tag_handler(fallback))
        root.warning("Logging setup failed. Switched to emergency console.", exc_info=True)
        return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually __name__) under the configured root."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Flush pending records and detach every handler created by this package.
    """
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_our_handler(h):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_recent_logs(n_lines: int = 100, log_path: Optional[str] = None) -> str:
    """
    Return the last lines of the log file.

    Args:
        n_lines: Maximum number of lines to return.
        log_path: File to read (defaults to get_default_log_path()).

    Returns:
        str: Log tail, or a short notice when the file is unavailable.
    """
    path = log_path or get_default_log_path()
    if not os.path.exists(path):
        return "Log file not found."

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return "".join(f.readlines()[-n_lines:])
    except OSError as e:
        return f"Error retrieving logs: {e}"


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: QueueListener) -> None:
    """Stop a QueueListener; a second call on the same listener is ignored."""
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
