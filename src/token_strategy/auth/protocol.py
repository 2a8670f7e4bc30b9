"""Protocols connecting the token strategy to its host framework."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from token_strategy._types import AuthenticateOptions, Credentials


@runtime_checkable
class OutcomeSink(Protocol):
    """Receives the single verdict of one authentication attempt.

    Exactly one of the three methods is called per attempt. Implementations
    may be plain or ``async`` methods.
    """

    def success(self, principal: Any, info: Any = None) -> Any:
        """The credentials were accepted."""
        ...

    def fail(self, error_or_info: Any = None) -> Any:
        """The request was malformed or the credentials were rejected."""
        ...

    def error(self, cause: Any) -> Any:
        """Verification could not complete."""
        ...


@runtime_checkable
class CredentialSource(Protocol):
    """Reads credentials from a request without side effects."""

    def extract(self, request: Any) -> Credentials | None:
        """Return the request's credentials, or ``None`` if either is absent or empty."""
        ...


@runtime_checkable
class Strategy(Protocol):
    """Capability a host framework requires of a pluggable strategy."""

    name: str

    async def authenticate(
        self,
        request: Any,
        sink: OutcomeSink,
        options: AuthenticateOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Authenticate ``request`` and report the verdict to ``sink``."""
        ...
