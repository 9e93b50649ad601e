"""
Tests for environment-driven settings.
"""

import logging

import pytest

from mask_tasker.config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_DATA_URL,
    DEFAULT_HTTP_TIMEOUT,
    get_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SCORES_DATA_URL", "SCORES_HTTP_TIMEOUT", "SCORES_CONNECT_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings.data_url == DEFAULT_DATA_URL
    assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert settings.connect_timeout == DEFAULT_CONNECT_TIMEOUT
    assert settings.logging_level == logging.INFO


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("SCORES_DATA_URL", "https://scores.example/data/")
    monkeypatch.setenv("SCORES_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("SCORES_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.data_url == "https://scores.example/data"
    assert settings.http_timeout == 5.0
    assert settings.connect_timeout == 2.5
    assert settings.logging_level == logging.DEBUG


@pytest.mark.parametrize("raw", ["soon", "-1", "0"])
def test_bad_timeout_falls_back_to_default(monkeypatch, caplog, raw):
    caplog.set_level(logging.WARNING, logger="mask_tasker.config")
    monkeypatch.setenv("SCORES_HTTP_TIMEOUT", raw)
    monkeypatch.setenv("SCORES_CONNECT_TIMEOUT", raw)
    settings = get_settings()
    assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert settings.connect_timeout == DEFAULT_CONNECT_TIMEOUT
    assert any("SCORES_HTTP_TIMEOUT" in r.getMessage() for r in caplog.records)


def test_unknown_log_level_uses_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert get_settings().logging_level == logging.INFO
