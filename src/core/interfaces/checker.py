"""Username existence contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The validation pipeline can run against a fake checker in tests with no
  network access, and against the GitHub adapter in production.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import LookupResult


@runtime_checkable
class UsernameExistenceChecker(Protocol):
    """Minimal contract for a remote username lookup.

    Design rules:
    - `exists` is async because it typically does I/O (HTTP).
    - It never raises for remote failures; they come back as a `LookupResult`.
    """

    async def exists(self, username: str) -> LookupResult:
        """Ask the remote service whether `username` is a real account."""

        ...
