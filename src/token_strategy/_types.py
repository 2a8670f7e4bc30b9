"""Type definitions shared across token-strategy."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from token_strategy.constants import DEFAULT_BAD_REQUEST_MESSAGE


@dataclass(frozen=True)
class Credentials:
    """An identity and the opaque token submitted with it."""

    identity: str
    token: str


@dataclass(frozen=True)
class Error:
    """The verifier could not complete, e.g. its backing store failed."""

    cause: Any


@dataclass(frozen=True)
class Rejected:
    """The verifier completed and found the credentials invalid."""

    info: Any = None


@dataclass(frozen=True)
class Accepted:
    """The verifier completed and found the credentials valid."""

    principal: Any
    info: Any = None


VerificationResult = Union[Error, Rejected, Accepted]

# async def verify(identity, token) -> VerificationResult
VerifyDelegate = Callable[[str, str], Union[VerificationResult, Awaitable[VerificationResult]]]


def to_result(error: Any = None, principal: Any = None, info: Any = None) -> VerificationResult:
    """Fold an ``(error, principal, info)`` triple into a ``VerificationResult``.

    Any ``error`` other than ``None`` wins regardless of ``principal``, even a
    falsy one such as ``False``. Otherwise a falsy ``principal`` is a rejection
    carrying ``info``.
    """
    if error is not None:
        return Error(error)
    if not principal:
        return Rejected(info)
    return Accepted(principal, info)


@dataclass(frozen=True)
class AuthenticateOptions:
    """Per-call options for ``TokenStrategy.authenticate``.

    Attributes:
        bad_request_message: Replaces the default message of the failure
            emitted when credentials are missing.
    """

    bad_request_message: str | None = None

    @property
    def missing_credentials_message(self) -> str:
        return self.bad_request_message or DEFAULT_BAD_REQUEST_MESSAGE

    @classmethod
    def coerce(cls, options: AuthenticateOptions | Mapping[str, Any] | None) -> AuthenticateOptions:
        """Accept an ``AuthenticateOptions``, a plain mapping, or ``None``."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            message = options.get("bad_request_message")
            if message is None:
                message = options.get("badRequestMessage")
            return cls(bad_request_message=message)
        raise TypeError(f"Unsupported options type: {type(options).__name__}")
