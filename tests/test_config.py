from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults():
    settings = AppSettings()
    assert settings.http_timeout_seconds == 10.0
    assert settings.github_api_url == "https://api.github.com"
    assert settings.github_token is None
    assert settings.default_file == Path("studentinfo.txt")
    assert settings.annotations is True
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STUDENTINFO_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("STUDENTINFO_GITHUB_TOKEN", "abc")
    monkeypatch.setenv("STUDENTINFO_DEFAULT_FILE", "info/me.txt")
    monkeypatch.setenv("studentinfo_log_level", "debug")

    settings = AppSettings()

    assert settings.http_timeout_seconds == 2.5
    assert settings.github_token == "abc"
    assert settings.default_file == Path("info/me.txt")
    assert settings.log_level == "DEBUG"


def test_dotenv_file_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("STUDENTINFO_ANNOTATIONS=false\n", encoding="utf-8")
    assert AppSettings().annotations is False


@pytest.mark.parametrize(
    "key, value",
    [
        ("STUDENTINFO_HTTP_TIMEOUT_SECONDS", "0"),
        ("STUDENTINFO_LOG_LEVEL", "chatty"),
        ("STUDENTINFO_USER_AGENT", ""),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppSettings()
