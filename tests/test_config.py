"""Tests for environment settings and logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from src.config.logging import LOG_FORMAT, configure_logging
from src.config.settings import Settings, load_settings


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert Settings(_env_file=None).log_level == "INFO"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


def test_invalid_log_level_is_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError):
        load_settings()


def test_configure_logging_uses_explicit_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    stream = io.StringIO()

    assert configure_logging("warning", stream=stream) == "WARNING"

    assert calls[0]["level"] == "WARNING"
    assert calls[0]["format"] == LOG_FORMAT
    assert calls[0]["stream"] is stream


def test_configure_logging_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.setenv("LOG_LEVEL", "error")

    assert configure_logging() == "ERROR"
