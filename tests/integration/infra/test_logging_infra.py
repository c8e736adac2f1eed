from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and handler ownership.
"""

import logging
import time
from pathlib import Path

import pytest

from schematree.infra.logging import (
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)
from schematree.infra.logging.core import _QUEUE_LISTENER_ATTR
from schematree.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach schematree handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()

def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."

def test_force_reconfigure_replaces_listener() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()
    first = getattr(root, _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first
    assert root.level == logging.DEBUG
    assert len([h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]) == 1

def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Drain the queue
    shutdown_logging()
    time.sleep(0.1)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."

def test_foreign_handlers_are_preserved() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        shutdown_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)

def test_no_handlers_requested_leaves_root_unconfigured() -> None:
    root = configure_logging(LoggingConfig(console=False, log_file=None))

    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
