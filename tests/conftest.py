# tests/conftest.py

import pytest

from zerosource.config.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Keep the developer's env / .env out of the tests.
    """
    for name in (
        "ZEROSOURCE_GENERATION_URL",
        "ZEROSOURCE_API_KEY",
        "ZEROSOURCE_MODEL_NAME",
        "ZEROSOURCE_REQUEST_TIMEOUT",
        "ZEROSOURCE_DEFAULT_PROJECT_NAME",
        "ZEROSOURCE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    reset_settings()
    yield
    reset_settings()
