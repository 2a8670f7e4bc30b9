"""token-strategy: identity + token authentication strategy for pluggable auth frameworks."""

from __future__ import annotations


from token_strategy._types import (
    Accepted,
    AuthenticateOptions,
    Credentials,
    Error,
    Rejected,
    VerificationResult,
    VerifyDelegate,
    to_result,
)
from token_strategy.auth import (
    AuthOutcome,
    CookieCredentialSource,
    CredentialSource,
    HeaderCredentialSource,
    OutcomeKind,
    OutcomeRecorder,
    OutcomeSink,
    Strategy,
    TokenStrategy,
    callback_delegate,
)
from token_strategy.constants import DEFAULT_BAD_REQUEST_MESSAGE, ERROR_CODES, STRATEGY_NAME
from token_strategy.errors import BadRequestError, StrategyConfigurationError, StrategyError

__all__ = [
    # Strategy
    "TokenStrategy",
    "Strategy",
    # Host contracts
    "OutcomeSink",
    "CredentialSource",
    "CookieCredentialSource",
    "HeaderCredentialSource",
    "OutcomeRecorder",
    "AuthOutcome",
    "OutcomeKind",
    # Verification results
    "Credentials",
    "VerificationResult",
    "VerifyDelegate",
    "Error",
    "Rejected",
    "Accepted",
    "to_result",
    "callback_delegate",
    "AuthenticateOptions",
    # Errors
    "StrategyError",
    "StrategyConfigurationError",
    "BadRequestError",
    # Constants
    "STRATEGY_NAME",
    "DEFAULT_BAD_REQUEST_MESSAGE",
    "ERROR_CODES",
]

__version__ = "0.1.0"
