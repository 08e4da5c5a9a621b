from __future__ import annotations

import pytest

from maec_v5.config import AppSettings
from maec_v5.container import build_container
from maec_v5.domain import ResolverPolicy


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MAEC_ENV", "MAEC_RESOLVER_POLICY", "MAEC_JSON_INDENT", "MAEC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings.environment == "development"
    assert settings.resolver_policy is ResolverPolicy.KIND_FIRST
    assert settings.json_indent == 2
    assert settings.log_level == "WARNING"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAEC_ENV", "test")
    monkeypatch.setenv("MAEC_RESOLVER_POLICY", " Structural ")
    monkeypatch.setenv("MAEC_JSON_INDENT", "compact")
    monkeypatch.setenv("MAEC_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "test"
    assert settings.resolver_policy is ResolverPolicy.STRUCTURAL
    assert settings.json_indent is None
    assert settings.log_level == "DEBUG"


def test_unknown_resolver_policy_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAEC_RESOLVER_POLICY", "guess")
    with pytest.raises(ValueError):
        AppSettings.from_env()


def test_build_container_configures_codec() -> None:
    settings = AppSettings(
        environment="test",
        resolver_policy=ResolverPolicy.STRUCTURAL,
        json_indent=4,
    )

    container = build_container(settings)

    assert container.settings is settings
    assert container.codec.policy is ResolverPolicy.STRUCTURAL
    assert container.codec.indent == 4
