import pytest

from yelp_client import config


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_get_settings_reads_env(monkeypatch):
    monkeypatch.setenv("YELP_API_KEY", "abc123")
    monkeypatch.setenv("YELP_REQUEST_TIMEOUT", "4.5")

    settings = config.get_settings()

    assert settings.api_key == "abc123"
    assert settings.request_timeout == 4.5


def test_get_settings_warns_when_missing(monkeypatch, caplog):
    monkeypatch.delenv("YELP_API_KEY", raising=False)
    monkeypatch.delenv("YELP_REQUEST_TIMEOUT", raising=False)

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    assert "YELP_API_KEY is not configured" in " ".join(caplog.messages)
    assert settings.api_key == ""
    assert settings.request_timeout == config.DEFAULT_REQUEST_TIMEOUT


def test_get_settings_ignores_bad_timeout(monkeypatch, caplog):
    monkeypatch.setenv("YELP_API_KEY", "abc123")
    monkeypatch.setenv("YELP_REQUEST_TIMEOUT", "soon")

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    assert settings.request_timeout == config.DEFAULT_REQUEST_TIMEOUT
    assert "not numeric" in " ".join(caplog.messages)
