"""Tests for environment-driven settings."""

import warnings

import pytest
from pydantic import ValidationError

from core.config import Settings, is_production_env


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("AMQP_URL", "amqp://user:pw@broker:5672//")
    monkeypatch.setenv("API_PREFIX", "/tracker")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings()

    assert settings.amqp_url == "amqp://user:pw@broker:5672//"
    assert settings.api_prefix == "/tracker"
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("value,expected", [("production", True), ("PROD", True), ("staging", False)])
def test_is_production_env(monkeypatch, value, expected):
    monkeypatch.setenv("ENV", value)

    assert is_production_env() is expected


def test_production_rejects_default_secret(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "CHANGE_ME")

    with pytest.raises(ValidationError, match="default value"):
        Settings()


def test_production_rejects_short_secret(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "too-short")

    with pytest.raises(ValidationError, match="at least 32 characters"):
        Settings()


def test_production_accepts_strong_secret(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "a" * 48)

    assert Settings().jwt_secret_key == "a" * 48


def test_development_only_warns(monkeypatch):
    monkeypatch.setenv("ENV", "development")
    monkeypatch.setenv("JWT_SECRET_KEY", "secret")

    with pytest.warns(UserWarning, match="default value"):
        settings = Settings()

    assert settings.jwt_secret_key == "secret"


def test_strong_secret_does_not_warn(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "b" * 40)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        Settings()
