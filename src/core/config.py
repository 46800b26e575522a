"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP) read config consistently.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_STUDENT_INFO_FILE = Path("studentinfo.txt")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the Core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDENTINFO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the GitHub lookup request (seconds).",
    )
    user_agent: str = Field(
        default="studentinfo-validator/0.1",
        min_length=1,
        description="User-Agent sent to the GitHub API (GitHub rejects requests without one).",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of a GitHub-compatible REST API.",
    )
    github_token: str | None = Field(
        default=None,
        description="Optional token; raises the API rate limit when set (e.g. GITHUB_TOKEN in CI).",
    )
    default_file: Path = Field(
        default=DEFAULT_STUDENT_INFO_FILE,
        description="File validated when no path is given on the command line.",
    )
    annotations: bool = Field(
        default=True,
        description="Emit GitHub Actions `::error::` annotations for each failure.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for diagnostic logging (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return level
