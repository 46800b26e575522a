import logging
import os
from pathlib import Path
from typing import Callable

import pytest

from cli.ui_components import LOG_HANDLER_NAME
from core.domain.models import LookupOutcome, LookupResult


VALID_CONTENT = (
    "Name: Jane Doe\n"
    "UOB ID: 12345678\n"
    "GitHub Username: octocat\n"
)


class FakeChecker:
    """Stands in for the GitHub adapter; records every username it is asked about."""

    def __init__(self, outcome: LookupOutcome = LookupOutcome.EXISTS, status_code: int | None = 200, detail: str | None = None):
        self.result = LookupResult(outcome=outcome, status_code=status_code, detail=detail)
        self.calls: list[str] = []

    async def exists(self, username: str) -> LookupResult:
        self.calls.append(username)
        return self.result


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test in an empty directory with no STUDENTINFO_* overrides."""
    for key in list(os.environ):
        if key.upper().startswith("STUDENTINFO_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_info(tmp_path) -> Callable[..., Path]:
    def _write(content: str = VALID_CONTENT, name: str = "studentinfo.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def existing_user() -> FakeChecker:
    return FakeChecker()


@pytest.fixture
def missing_user() -> FakeChecker:
    return FakeChecker(LookupOutcome.NOT_FOUND, status_code=404)


@pytest.fixture(autouse=True)
def detach_rich_handler():
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == LOG_HANDLER_NAME]:
        root.removeHandler(handler)
