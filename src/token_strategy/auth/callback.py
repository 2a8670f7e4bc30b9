"""Adapter for verifiers that report through a ``done`` callback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from token_strategy._types import VerificationResult, to_result

logger = logging.getLogger(__name__)

Done = Callable[..., None]
CallbackVerifier = Callable[[str, str, Done], Any]


def callback_delegate(fn: CallbackVerifier) -> Callable[[str, str], Any]:
    """Wrap ``fn(identity, token, done)`` as an async verify delegate.

    ``done(err=None, principal=None, info=None)`` may be called synchronously
    inside ``fn`` or later, from any thread. The first call decides the result
    (see ``to_result``); further calls are logged and ignored. If ``done`` is
    never called the returned coroutine never completes.
    """
    if not callable(fn):
        raise TypeError(f"fn must be callable, got {type(fn).__name__}")

    async def delegate(identity: str, token: str) -> VerificationResult:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[VerificationResult] = loop.create_future()

        def _resolve(result: VerificationResult) -> None:
            if future.cancelled():
                logger.debug("Verify callback for '%s' completed after cancellation; ignoring", identity)
                return
            if future.done():
                logger.warning("Verify callback for '%s' invoked more than once; ignoring", identity)
                return
            future.set_result(result)

        def done(err: Any = None, principal: Any = None, info: Any = None) -> None:
            loop.call_soon_threadsafe(_resolve, to_result(err, principal, info))

        fn(identity, token, done)
        return await future

    return delegate
