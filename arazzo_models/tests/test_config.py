from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from arazzo_models.config import ArazzoSettings
from arazzo_models.loader.context import LoaderContext
from arazzo_models.logger import LevelColourFormatter, get_logger


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARAZZO_STRICT_LIST_ENTRIES", "true")
    monkeypatch.setenv("ARAZZO_LOG_LEVEL", "debug")
    monkeypatch.setenv("ARAZZO_JSON_INDENT", "4")

    settings = ArazzoSettings(_env_file=None)

    assert settings.strict_list_entries is True
    assert settings.log_level == "DEBUG"
    assert settings.logging_level == logging.DEBUG
    assert settings.json_indent == 4
    assert LoaderContext.from_settings(settings) == LoaderContext(strict_list_entries=True)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ARAZZO_STRICT_LIST_ENTRIES", "ARAZZO_LOG_LEVEL", "ARAZZO_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)

    settings = ArazzoSettings(_env_file=None)

    assert settings.strict_list_entries is False
    assert settings.log_level == "INFO"
    assert settings.json_indent == 2


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ArazzoSettings(_env_file=None, log_level="chatty")


def test_get_logger_is_cached() -> None:
    first = get_logger("arazzo_models.tests.cached")
    second = get_logger("arazzo_models.tests.cached", level=logging.ERROR)

    assert first is second
    assert first.propagate is False
    assert len(first.handlers) == 1


def test_formatter_colours_level_only_when_enabled() -> None:
    record = logging.LogRecord("arazzo_models.x", logging.DEBUG, __file__, 1, "dropped %s", ("a",), None)

    plain = LevelColourFormatter(colour=False).format(record)
    coloured = LevelColourFormatter(colour=True).format(record)

    assert "| arazzo_models.x | DEBUG | dropped a" in plain
    assert "\033[36mDEBUG\033[0m" in coloured
    assert record.levelname == "DEBUG"
