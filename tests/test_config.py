import pytest

from deeplx.core.config import DEFAULT_DEEPL_ENDPOINT, get_settings


def test_defaults(monkeypatch):
    for name in ("DEEPLX_ENDPOINT", "DEEPLX_TIMEOUT_SECONDS", "DEEPLX_MAX_TEXT_LENGTH", "DEEPLX_CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.endpoint == DEFAULT_DEEPL_ENDPOINT
    assert settings.timeout_seconds == 10.0
    assert settings.max_text_length == 5000
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEEPLX_ENDPOINT", "http://localhost:9000/jsonrpc")
    monkeypatch.setenv("DEEPLX_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("DEEPLX_MAX_TEXT_LENGTH", "1200")
    monkeypatch.setenv("DEEPLX_CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    settings = get_settings()
    assert settings.endpoint == "http://localhost:9000/jsonrpc"
    assert settings.timeout_seconds == 2.5
    assert settings.max_text_length == 1200
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_settings_are_cached(monkeypatch):
    monkeypatch.setenv("DEEPLX_APP_ENV", "test")
    assert get_settings() is get_settings()


@pytest.mark.parametrize("name,value", [("DEEPLX_MAX_TEXT_LENGTH", "lots"), ("DEEPLX_TIMEOUT_SECONDS", "0")])
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError) as info:
        get_settings()
    assert name in str(info.value)
