from __future__ import annotations

from confusables_db.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.DATA_PATH is None
    assert settings.SOURCE_URL_LATEST.endswith("/latest/confusables.txt")
    assert "{version}" in settings.SOURCE_URL_VERSIONED
    assert settings.HTTP_TIMEOUT_S == 30.0
    assert settings.METRICS_ENABLED is True


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CONFUSABLES_DATA_PATH", "/tmp/confusables.json")
    monkeypatch.setenv("CONFUSABLES_LOG_JSON", "true")
    monkeypatch.setenv("CONFUSABLES_HTTP_TIMEOUT_S", "3")
    settings = get_settings()
    assert settings.DATA_PATH == "/tmp/confusables.json"
    assert settings.LOG_JSON is True
    assert settings.HTTP_TIMEOUT_S == 3.0
    assert get_settings() is settings
