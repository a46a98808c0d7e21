# tests/test_settings.py

from zerosource.config.settings import Settings, get_settings, reset_settings


def test_settings_defaults():
    settings = Settings()

    assert settings.GENERATION_URL is None
    assert settings.API_KEY is None
    assert settings.MODEL_NAME == "gpt-4"
    assert settings.DEFAULT_PROJECT_NAME == "Unnamed Project"
    assert settings.deep_validation_available is False


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("ZEROSOURCE_GENERATION_URL", "http://localhost:9000/")
    monkeypatch.setenv("ZEROSOURCE_API_KEY", "secret")
    monkeypatch.setenv("ZEROSOURCE_REQUEST_TIMEOUT", "5")

    settings = Settings()
    assert settings.deep_validation_available is True
    assert settings.API_KEY.get_secret_value() == "secret"
    assert settings.REQUEST_TIMEOUT == 5


def test_settings_dotenv_file(tmp_path):
    # conftest chdirs into tmp_path
    (tmp_path / ".env").write_text("ZEROSOURCE_MODEL_NAME=local-model\n", encoding="utf-8")

    assert Settings().MODEL_NAME == "local-model"


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("ZEROSOURCE_MODEL_NAME", "other")
    assert get_settings().MODEL_NAME == first.MODEL_NAME

    reset_settings()
    assert get_settings().MODEL_NAME == "other"
