from __future__ import annotations

import logging

import pytest

from cthing_publishing.config import PublishingConfig
from cthing_publishing.exceptions import ConfigError


def test_defaults_from_env() -> None:
    config = PublishingConfig.from_env()
    assert config.groups == frozenset({"org.cthing", "com.cthing"})
    assert config.organization_name == "C Thing Software"
    assert config.organization_url == "https://www.cthing.com"
    assert config.logging_level == logging.WARNING
    config.validate()


def test_overrides_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CTHING_GROUPS", " com.acme , org.acme,, ")
    monkeypatch.setenv("CTHING_ORG_NAME", "Acme")
    monkeypatch.setenv("CTHING_LOG_LEVEL", "debug")
    config = PublishingConfig.from_env()
    assert config.groups == frozenset({"com.acme", "org.acme"})
    assert config.organization_name == "Acme"
    assert config.logging_level == logging.DEBUG


def test_validate_rejects_empty_groups(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CTHING_GROUPS", "")
    with pytest.raises(ConfigError):
        PublishingConfig.from_env().validate()


def test_validate_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        PublishingConfig(log_level="LOUD").validate()


@pytest.mark.parametrize(
    ("name", "level"),
    [("CRITICAL", logging.CRITICAL), ("ERROR", logging.ERROR), ("INFO", logging.INFO), ("DEBUG", logging.DEBUG)],
)
def test_logging_level_is_numeric(name: str, level: int) -> None:
    config = PublishingConfig(log_level=name)
    config.validate()
    assert isinstance(config.logging_level, int)
    assert config.logging_level == level
