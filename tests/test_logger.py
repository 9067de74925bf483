import json
import logging
import sys

import curried.logger.logger as logger_module
from curried.core.config import Settings
from curried.logger.logger import PACKAGE_LOGGER, logger, setup_logger


def test_package_logger():
    assert logger.name == PACKAGE_LOGGER
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.level == logging.getLevelName(logger_module.settings.LOG_LEVEL)


def test_package_handler_format():
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == logger_module.DEFAULT_FORMAT


def test_child_logger_shares_package_handler():
    child = setup_logger("curried.test.child", level="DEBUG")
    assert child.handlers == []
    assert child.propagate is True
    assert child.level == logging.DEBUG


def test_setup_logger_configures_once():
    first = setup_logger("curried.test.once", level="DEBUG")
    second = setup_logger("curried.test.once", level="ERROR")

    assert first is second
    assert first.level == logging.DEBUG


def test_outside_logger_gets_own_handler():
    configured = setup_logger("elsewhere.test.stdout", format_string="%(message)s")
    assert len(configured.handlers) == 1
    assert configured.propagate is False
    assert configured.handlers[0].stream is sys.stdout
    assert configured.handlers[0].formatter._fmt == "%(message)s"


def test_level_defaults_to_config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"LOG_LEVEL": "DEBUG"}))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(logger_module, "settings", Settings.load(path))

    assert setup_logger("curried.test.from_file").level == logging.DEBUG
    assert setup_logger("elsewhere.test.from_file").level == logging.DEBUG


def test_explicit_level_wins_over_settings(monkeypatch):
    monkeypatch.setattr(logger_module, "settings", Settings(LOG_LEVEL="DEBUG"))
    assert setup_logger("curried.test.explicit", level="error").level == logging.ERROR
