"""Tests for logging helpers."""

import logging

import pytest

from tinyknn.utils.logging import set_log_level, setup_logger


def test_setup_logger_replaces_handlers():
    logger = setup_logger("tinyknn.test_logger")
    logger = setup_logger("tinyknn.test_logger")

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_setup_logger_with_file(temp_dir):
    log_file = f"{temp_dir}/logs/tinyknn.log"
    logger = setup_logger("tinyknn.test_file_logger", log_file=log_file)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()

    with open(log_file, encoding="utf-8") as f:
        assert "hello" in f.read()

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


def test_set_log_level():
    logger = setup_logger("tinyknn.test_level")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("INFO")
    assert logger.level == logging.INFO


def test_set_log_level_rejects_unknown_level():
    with pytest.raises(ValueError):
        set_log_level("CHATTY")
