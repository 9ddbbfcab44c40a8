from pathlib import Path

from plstreaks.config.settings import AppSettings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATA_BASE_URL", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.data_dir == Path("data")
    assert settings.data_base_url is None
    assert settings.request_timeout == 30.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/srv/seasons")
    monkeypatch.setenv("REQUEST_TIMEOUT", "5")
    settings = AppSettings(_env_file=None)
    assert settings.data_dir == Path("/srv/seasons")
    assert settings.request_timeout == 5.0


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
