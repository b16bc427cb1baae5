import logging
import os
import subprocess
import sys

import pytest
from pydantic import ValidationError
from minimalisp.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MINIMALISP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MINIMALISP_LOG_FORMAT", raising=False)
    settings = Settings.load()
    assert settings.LOG_LEVEL == "WARNING"
    assert "%(message)s" in settings.LOG_FORMAT


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("MINIMALISP_LOG_LEVEL", "debug")
    monkeypatch.setenv("MINIMALISP_LOG_FORMAT", "%(levelname)s %(message)s")
    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(levelname)s %(message)s"


def test_unknown_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")


def test_load_unknown_level_falls_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv("MINIMALISP_LOG_LEVEL", "verbose")
    monkeypatch.setenv("MINIMALISP_LOG_FORMAT", "%(message)s")
    # The package logger does not propagate, so listen on the module logger
    config_logger = logging.getLogger("minimalisp.core.config")
    config_logger.addHandler(caplog.handler)
    config_logger.setLevel(logging.WARNING)
    try:
        settings = Settings.load()
    finally:
        config_logger.removeHandler(caplog.handler)
        config_logger.setLevel(logging.NOTSET)
    assert settings == Settings()
    assert "Ignoring invalid minimalisp settings" in caplog.text


def test_package_imports_with_unknown_level():
    env = dict(os.environ, MINIMALISP_LOG_LEVEL="verbose")
    src = os.path.join(os.path.dirname(__file__), os.pardir, os.pardir, "src")
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [os.path.abspath(src), env.get("PYTHONPATH")])
    )
    result = subprocess.run(
        [sys.executable, "-c", "import minimalisp; print(minimalisp.first([1]))"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "1"
