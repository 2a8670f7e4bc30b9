"""Token authentication strategy."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from token_strategy._types import (
    Accepted,
    AuthenticateOptions,
    Error,
    Rejected,
    VerificationResult,
    VerifyDelegate,
)
from token_strategy.auth.outcome import AuthOutcome, OutcomeRecorder
from token_strategy.auth.protocol import CredentialSource, OutcomeSink, Strategy
from token_strategy.auth.sources import CookieCredentialSource
from token_strategy.constants import STRATEGY_NAME
from token_strategy.errors import BadRequestError, StrategyConfigurationError

logger = logging.getLogger(__name__)


async def _emit(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class TokenStrategy:
    """Authenticates requests from an identity and token pair.

    The credentials are read from the request (cookies ``username`` and
    ``token`` by default) and handed to ``verify``, which decides whether
    they are valid::

        async def verify(username: str, token: str) -> VerificationResult:
            user = await users.find(username=username, token=token)
            return Accepted(user) if user else Rejected()

        strategy = TokenStrategy(verify)

    Args:
        verify: Async (or plain) callable taking ``(identity, token)`` and
            returning an ``Error``, ``Rejected`` or ``Accepted`` result.
        source: Where credentials are read from. Defaults to cookies.
    """

    name = STRATEGY_NAME

    def __init__(self, verify: VerifyDelegate, *, source: CredentialSource | None = None) -> None:
        if verify is None:
            raise StrategyConfigurationError("token authentication strategy requires a verify function")
        if not callable(verify):
            raise StrategyConfigurationError(f"verify must be callable, got {type(verify).__name__}")
        self._verify = verify
        self._source = source if source is not None else CookieCredentialSource()

    @property
    def source(self) -> CredentialSource:
        return self._source

    async def authenticate(
        self,
        request: Any,
        sink: OutcomeSink,
        options: AuthenticateOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Authenticate ``request``, emitting exactly one outcome through ``sink``.

        Missing credentials fail with ``BadRequestError`` without consulting
        ``verify``. Otherwise the verification result is passed through:
        ``Error`` to ``sink.error``, ``Rejected`` to ``sink.fail`` and
        ``Accepted`` to ``sink.success``.
        """
        opts = AuthenticateOptions.coerce(options)
        credentials = self._source.extract(request)
        if credentials is None:
            logger.debug("Missing credentials, failing with bad request")
            await _emit(sink.fail(BadRequestError(opts.missing_credentials_message)))
            return

        result = await self._call_verify(credentials.identity, credentials.token)

        if isinstance(result, Error):
            logger.debug("Verification of '%s' could not complete", credentials.identity)
            await _emit(sink.error(result.cause))
        elif isinstance(result, Rejected):
            logger.debug("Credentials for '%s' rejected", credentials.identity)
            await _emit(sink.fail(result.info))
        else:
            logger.debug("Credentials for '%s' accepted", credentials.identity)
            await _emit(sink.success(result.principal, result.info))

    async def _call_verify(self, identity: str, token: str) -> VerificationResult:
        """Invoke ``verify`` once, folding raised exceptions into ``Error``."""
        try:
            result = self._verify(identity, token)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            return Error(exc)

        if not isinstance(result, (Error, Rejected, Accepted)):
            return Error(
                TypeError(f"verify must return Error, Rejected or Accepted, got {type(result).__name__}")
            )
        return result

    async def run(
        self,
        request: Any,
        options: AuthenticateOptions | Mapping[str, Any] | None = None,
    ) -> AuthOutcome:
        """Authenticate ``request`` into a fresh ``OutcomeRecorder`` and return its outcome."""
        recorder = OutcomeRecorder()
        await self.authenticate(request, recorder, options)
        if recorder.outcome is None:
            raise RuntimeError("authenticate returned without emitting an outcome")
        return recorder.outcome


# Verify protocol compliance at import time
assert isinstance(TokenStrategy.__new__(TokenStrategy), Strategy)
