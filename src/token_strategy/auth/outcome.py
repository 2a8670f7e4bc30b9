"""Reference outcome sink that records the verdict of one attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from token_strategy.auth.protocol import OutcomeSink


class OutcomeKind(str, Enum):
    """Terminal state of an authentication attempt."""

    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True)
class AuthOutcome:
    """The single verdict emitted for one request.

    Attributes:
        kind: Which of the three signals was emitted.
        principal: The accepted principal (success only).
        info: Success metadata, or the failure payload.
        error: The cause passed to ``error()`` (error only).
    """

    kind: OutcomeKind
    principal: Any = None
    info: Any = None
    error: Any = None

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


class OutcomeRecorder:
    """``OutcomeSink`` that stores the verdict instead of writing a response."""

    def __init__(self) -> None:
        self._outcome: AuthOutcome | None = None

    @property
    def outcome(self) -> AuthOutcome | None:
        return self._outcome

    def _record(self, outcome: AuthOutcome) -> None:
        if self._outcome is not None:
            raise RuntimeError(
                f"Outcome already recorded as {self._outcome.kind.value!r}; refusing {outcome.kind.value!r}"
            )
        self._outcome = outcome

    def success(self, principal: Any, info: Any = None) -> None:
        self._record(AuthOutcome(OutcomeKind.SUCCESS, principal=principal, info=info))

    def fail(self, error_or_info: Any = None) -> None:
        self._record(AuthOutcome(OutcomeKind.FAILURE, info=error_or_info))

    def error(self, cause: Any) -> None:
        self._record(AuthOutcome(OutcomeKind.ERROR, error=cause))


# Verify protocol compliance at import time
assert isinstance(OutcomeRecorder(), OutcomeSink)
