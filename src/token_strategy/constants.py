"""Constants for token-strategy."""

from __future__ import annotations

# Name the host framework registers the strategy under.
STRATEGY_NAME = "token"

DEFAULT_BAD_REQUEST_MESSAGE = "Missing credentials"

# Credential names read by the default sources
DEFAULT_IDENTITY_FIELD = "username"
DEFAULT_TOKEN_FIELD = "token"
DEFAULT_IDENTITY_HEADER = "x-auth-username"
DEFAULT_TOKEN_HEADER = "x-auth-token"

ErrorCodes: dict[str, str] = {
    "BAD_REQUEST": "BAD_REQUEST",
    "CONFIGURATION_ERROR": "CONFIGURATION_ERROR",
}

ERROR_CODES = ErrorCodes
