"""Error types raised or emitted by the token strategy."""

from __future__ import annotations

from typing import Any

from token_strategy.constants import DEFAULT_BAD_REQUEST_MESSAGE, ErrorCodes


class StrategyError(Exception):
    """Base error carrying a stable ``code``, a ``message`` and optional ``details``."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class StrategyConfigurationError(StrategyError, ValueError):
    """Raised when a strategy is constructed with invalid arguments."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code=ErrorCodes["CONFIGURATION_ERROR"], message=message, **kwargs)


class BadRequestError(StrategyError):
    """Emitted as a failure when a request carries no usable credentials."""

    status = 400

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code=ErrorCodes["BAD_REQUEST"],
            message=message or DEFAULT_BAD_REQUEST_MESSAGE,
            **kwargs,
        )
