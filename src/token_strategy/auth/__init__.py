"""Token authentication strategy and its host-framework protocols."""

from token_strategy.auth.callback import callback_delegate
from token_strategy.auth.outcome import AuthOutcome, OutcomeKind, OutcomeRecorder
from token_strategy.auth.protocol import CredentialSource, OutcomeSink, Strategy
from token_strategy.auth.sources import CookieCredentialSource, HeaderCredentialSource
from token_strategy.auth.strategy import TokenStrategy

__all__ = [
    "Strategy",
    "OutcomeSink",
    "CredentialSource",
    "TokenStrategy",
    "CookieCredentialSource",
    "HeaderCredentialSource",
    "AuthOutcome",
    "OutcomeKind",
    "OutcomeRecorder",
    "callback_delegate",
]
