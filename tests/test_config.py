"""
Tests for environment-driven settings
"""

from gamereviews.config import Settings, is_production


def test_defaults():
    settings = Settings()

    assert settings.api_port == 4000
    assert settings.id_strategy == "uuid"
    assert settings.seed_defaults is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GAMEREVIEWS_API_PORT", "5000")
    monkeypatch.setenv("GAMEREVIEWS_ID_STRATEGY", "counter")
    monkeypatch.setenv("GAMEREVIEWS_SEED_DEFAULTS", "false")

    settings = Settings()

    assert settings.api_port == 5000
    assert settings.id_strategy == "counter"
    assert settings.seed_defaults is False


def test_is_production():
    assert is_production(Settings(environment="production"))
    assert is_production(Settings(environment="PROD"))
    assert not is_production(Settings(environment="development"))
