"""Tests for configuration module."""

from showcase_admin.config import (
    ApiConfig,
    AppConfig,
    LanguageConfig,
    Settings,
    _codes,
    _env,
    load_settings,
)


def test_env_returns_value(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "hello")
    assert _env("TEST_KEY") == "hello"


def test_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY", "fallback") == "fallback"


def test_env_returns_empty_string_default(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY") == ""


def test_codes_strips_and_drops_blanks():
    assert _codes(" en, fr ,,tr ") == ("en", "fr", "tr")


def test_app_config_is_development_true():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "development")
    assert config.is_development is True


def test_app_config_is_development_false():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "production")
    assert config.is_development is False


def test_app_config_defaults(monkeypatch):
    keys = ("APP_ENV", "LOG_LEVEL", "LOG_FILE", "APP_HOST", "APP_PORT", "SHOWCASE_SESSION_TTL")
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    config = AppConfig()
    assert config.env == "development"
    assert config.log_level == "INFO"
    assert config.log_file == ""
    assert config.host == "127.0.0.1"
    assert config.port == 8000
    assert config.session_ttl_seconds == 3600.0


def test_api_config(monkeypatch):
    monkeypatch.setenv("SHOWCASE_API_URL", "https://api.example.com")
    monkeypatch.setenv("SHOWCASE_API_TOKEN", "secret")
    monkeypatch.setenv("SHOWCASE_API_TIMEOUT", "2.5")
    config = ApiConfig()
    assert config.base_url == "https://api.example.com"
    assert config.token == "secret"
    assert config.timeout_seconds == 2.5


def test_api_config_defaults(monkeypatch):
    monkeypatch.delenv("SHOWCASE_API_URL", raising=False)
    monkeypatch.delenv("SHOWCASE_API_TOKEN", raising=False)
    monkeypatch.delenv("SHOWCASE_API_TIMEOUT", raising=False)
    config = ApiConfig()
    assert config.base_url == "http://localhost:4000"
    assert config.token == ""
    assert config.timeout_seconds == 10.0


def test_language_config(monkeypatch):
    monkeypatch.setenv("SHOWCASE_LANGUAGES", "tr,en")
    config = LanguageConfig()
    assert config.codes == ("tr", "en")


def test_language_config_default_codes(monkeypatch):
    monkeypatch.delenv("SHOWCASE_LANGUAGES", raising=False)
    assert LanguageConfig().codes == ("en", "fr", "tr")


def test_app_config_session_ttl(monkeypatch):
    monkeypatch.setenv("SHOWCASE_SESSION_TTL", "90")
    assert AppConfig().session_ttl_seconds == 90.0


def test_settings_creates_all_sub_configs():
    settings = Settings()
    assert isinstance(settings.api, ApiConfig)
    assert isinstance(settings.languages, LanguageConfig)
    assert isinstance(settings.app, AppConfig)


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SHOWCASE_LANGUAGES", "en")
    settings = load_settings()
    assert settings.languages.codes == ("en",)
    assert settings.app.env == "production"
