import pytest
from pydantic import ValidationError

from src.core.config import DEFAULT_API_URL, UpbitSettings

ENV_VARS = [
    "UPBIT_API_URL", "UPBIT_ACCESS_KEY", "UPBIT_SECRET_KEY",
    "UPBIT_USE_PROXY", "UPBIT_PROXY_BASE_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    settings = UpbitSettings(_env_file=None)
    assert settings.base_url == DEFAULT_API_URL
    assert settings.access_key is None
    assert settings.secret_key is None
    assert not settings.has_credentials


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("UPBIT_API_URL", "https://example.test/")
    monkeypatch.setenv("UPBIT_ACCESS_KEY", "ak")
    monkeypatch.setenv("UPBIT_SECRET_KEY", "sk")

    settings = UpbitSettings(_env_file=None)
    assert settings.base_url == "https://example.test"
    assert settings.has_credentials


def test_proxy_flag_switches_base_url(monkeypatch):
    monkeypatch.setenv("UPBIT_USE_PROXY", "true")
    monkeypatch.setenv("UPBIT_PROXY_BASE_URL", "http://localhost:3000/api/upbit")

    settings = UpbitSettings(_env_file=None)
    assert settings.base_url == "http://localhost:3000/api/upbit"


def test_empty_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("UPBIT_SECRET_KEY", "")
    settings = UpbitSettings(_env_file=None)
    assert settings.secret_key is None


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("UPBIT_ACCESS_KEY=file-ak\nUPBIT_SECRET_KEY=file-sk\n")

    settings = UpbitSettings(_env_file=env_file)
    assert settings.access_key == "file-ak"
    assert settings.secret_key == "file-sk"


def test_settings_are_frozen():
    settings = UpbitSettings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.api_url = "https://other.test"


def test_credentials_hidden_from_repr():
    settings = UpbitSettings(_env_file=None, access_key="ak-visible?", secret_key="sk-visible?")
    assert "sk-visible?" not in repr(settings)
    assert "ak-visible?" not in repr(settings)
