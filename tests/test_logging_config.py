import logging
import sys

import pytest

from fabula.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_single_handler_installed(restore_root_logger, monkeypatch):
    monkeypatch.delenv("FABULA_LOG_LEVEL", raising=False)
    configure_logging(logging.INFO)
    configure_logging(logging.INFO)
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.INFO


def test_env_level_override(restore_root_logger, monkeypatch):
    monkeypatch.setenv("FABULA_LOG_LEVEL", "debug")
    configure_logging(logging.WARNING)
    assert restore_root_logger.level == logging.DEBUG


def test_unknown_env_level_keeps_default(restore_root_logger, monkeypatch):
    monkeypatch.setenv("FABULA_LOG_LEVEL", "chatty")
    configure_logging(logging.WARNING)
    assert restore_root_logger.level == logging.WARNING


def test_handler_writes_to_stderr(restore_root_logger, monkeypatch):
    monkeypatch.delenv("FABULA_LOG_LEVEL", raising=False)
    configure_logging()
    (handler,) = restore_root_logger.handlers
    assert handler.stream is sys.stderr
    assert handler.formatter._fmt == LOG_FORMAT
