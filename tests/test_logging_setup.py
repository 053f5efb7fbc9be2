import logging
import os
import sys
from logging.handlers import RotatingFileHandler

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqidcodec import ConfigurationError
from sqidcodec.config import Config
from sqidcodec.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("sqidcodec")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_default_level_follows_config(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "error")
    logger = setup_logging()
    assert logger.level == logging.ERROR


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "error")
    assert setup_logging("debug").level == logging.DEBUG


def test_invalid_configured_level_raises(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError, match="SQIDS_LOG_LEVEL"):
        setup_logging()


def test_handlers_are_not_duplicated(tmp_path):
    log_file = str(tmp_path / "codec.log")
    setup_logging("info", log_file)
    logger = setup_logging("info", log_file)
    assert sum(type(h) is logging.StreamHandler for h in logger.handlers) == 1
    assert sum(isinstance(h, RotatingFileHandler) for h in logger.handlers) == 1
