import pytest

import newts_stress
from newts_stress import config


def test_get_settings_defaults(clean_settings):
    settings = config.get_settings()
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_settings_read_environment(clean_settings, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_get_settings_is_cached(clean_settings):
    assert config.get_settings() is config.get_settings()


def test_public_api_exports():
    for name in newts_stress.__all__:
        assert hasattr(newts_stress, name)
    assert newts_stress.CASSANDRA_TTL == 86400
