import logging
import os
import subprocess
import sys

import keyedlist as kl
from keyedlist.logger import resolve_level


def test_package_logger_is_silent_by_default():
    assert kl.logger.name == "keyedlist"
    assert any(isinstance(h, logging.NullHandler) for h in kl.logger.handlers)
    assert not any(type(h) is logging.StreamHandler for h in kl.logger.handlers)


def test_setup_logger_adds_one_handler():
    log = kl.setup_logger("keyedlist.test_setup", level="info")
    assert log.level == logging.INFO
    assert not log.propagate
    assert kl.setup_logger("keyedlist.test_setup") is log
    assert len(log.handlers) == 1


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("KEYEDLIST_LOG_LEVEL", "debug")
    assert resolve_level() == logging.DEBUG
    log = kl.setup_logger("keyedlist.test_env")
    assert log.level == logging.DEBUG


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("KEYEDLIST_LOG_LEVEL", "verbose")
    assert resolve_level() == logging.WARNING
    assert resolve_level("loud") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_import_with_unknown_log_level():
    result = subprocess.run(
        [sys.executable, "-c", "import keyedlist; print(keyedlist.logger.level)"],
        env={**os.environ, "KEYEDLIST_LOG_LEVEL": "verbose"},
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == str(logging.WARNING)
