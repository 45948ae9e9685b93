"""Tests for the package logger."""

import logging

import numpy as np

import qrs_detect
from qrs_detect import logger, set_log_file, set_log_level


def test_set_log_level():
    old_level = logger.level
    try:
        set_log_level("WARNING")
        assert logger.level == logging.WARNING
        assert all(handler.level == logging.WARNING for handler in logger.handlers)
    finally:
        set_log_level(logging.getLevelName(old_level))


def test_set_log_file(tmp_path):
    log_file = tmp_path / "logs" / "detection.log"
    try:
        set_log_file(log_file, log_level="INFO")
        set_log_file(log_file, log_level="INFO")
        assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1

        qrs_detect.detect(np.zeros(100))
        for handler in logger.handlers:
            handler.flush()

        assert "No R peaks" in log_file.read_text()
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                logger.removeHandler(handler)
