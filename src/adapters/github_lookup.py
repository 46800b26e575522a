"""GitHub user existence check.

Uses the official REST API (`GET /users/<username>`). Only the status code is
consumed; the JSON body is discarded.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import LookupOutcome, LookupResult
from core.interfaces.checker import UsernameExistenceChecker

logger = logging.getLogger(__name__)

_STATUS_OUTCOMES: dict[int, LookupOutcome] = {
    200: LookupOutcome.EXISTS,
    404: LookupOutcome.NOT_FOUND,
    403: LookupOutcome.RATE_LIMITED,
}


def outcome_for_status(status_code: int) -> LookupOutcome:
    return _STATUS_OUTCOMES.get(status_code, LookupOutcome.UNEXPECTED_STATUS)


class GitHubUserChecker(UsernameExistenceChecker):
    """Verifies that a username belongs to a real GitHub account."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def user_url(self, username: str) -> str:
        base = self._settings.github_api_url.rstrip("/")
        return f"{base}/users/{quote(username, safe='')}"

    def _headers(self) -> dict[str, str]:
        # GitHub requires a UA; the Accept header pins the stable JSON media type.
        headers = {"Accept": "application/vnd.github+json"}
        if self._settings.github_token:
            headers["Authorization"] = f"Bearer {self._settings.github_token}"
        return headers

    async def exists(self, username: str) -> LookupResult:
        url = self.user_url(username)
        logger.debug("GET %s", url)
        try:
            async with build_async_client(
                self._settings,
                extra_headers=self._headers(),
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.debug("Transport error for %s: %r", url, exc)
            detail = str(exc) or exc.__class__.__name__
            return LookupResult(outcome=LookupOutcome.TRANSPORT_ERROR, detail=detail)

        return LookupResult(
            outcome=outcome_for_status(response.status_code),
            status_code=response.status_code,
        )
