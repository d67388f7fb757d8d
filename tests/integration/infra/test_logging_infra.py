from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation, the on-screen console queue and the log tail helper.
"""

import logging
import queue
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from treenav.infra.logging import (
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_recent_logs,
    parse_level,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Multiple configuration calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial == 1


def test_force_reconfigures(tmp_path: Path) -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    first_listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)

    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is not first_listener
    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_file_output_and_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    ))

    logger = logging.getLogger("treenav.test_rotate")
    for _ in range(10):
        logger.debug("Cursor moved through a long list of siblings. " * 3)

    # Stopping the listener flushes the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_ui_queue_receives_records() -> None:
    ui_queue: queue.Queue = queue.Queue()
    configure_logging(LoggingConfig(level="INFO", console=False, ui_queue=ui_queue))

    logging.getLogger("treenav.test_ui").info("Cursor: [0, 1]")

    record = ui_queue.get_nowait()
    assert record.getMessage() == "Cursor: [0, 1]"
    assert any(isinstance(h, QueueHandler) for h in _our_handlers())


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_leaves_foreign_handlers() -> None:
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(console=True))
        shutdown_logging()
        assert foreign in root.handlers
        assert _our_handlers() == []
    finally:
        root.removeHandler(foreign)


def test_get_recent_logs(tmp_path: Path) -> None:
    log_file = tmp_path / "tail.log"
    log_file.write_text("".join(f"line {i}\n" for i in range(20)), encoding="utf-8")

    assert get_recent_logs(2, str(log_file)) == "line 18\nline 19\n"
    assert get_recent_logs(2, str(tmp_path / "missing.log")) == "Log file not found."


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    (" WARN ", logging.WARNING),
    ("", logging.INFO),
    ("verbose", logging.INFO),
])
def test_parse_level(name, expected) -> None:
    assert parse_level(name) == expected
