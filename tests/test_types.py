"""Tests for verification result types and AuthenticateOptions."""

from __future__ import annotations

import pytest

from token_strategy._types import Accepted, AuthenticateOptions, Error, Rejected, to_result


class TestToResult:
    def test_error_wins_regardless_of_principal(self):
        cause = RuntimeError("boom")
        assert to_result(cause, {"id": 1}, "info") == Error(cause)

    @pytest.mark.parametrize("principal", [None, False, 0, "", {}])
    def test_falsy_principal_is_rejection(self, principal):
        assert to_result(None, principal, {"message": "no"}) == Rejected({"message": "no"})

    def test_truthy_principal_is_acceptance(self):
        assert to_result(None, {"id": 1}, "meta") == Accepted({"id": 1}, "meta")

    def test_defaults_reject(self):
        assert to_result() == Rejected()

    @pytest.mark.parametrize("error", [False, 0, ""])
    def test_falsy_non_null_error_still_errors(self, error):
        assert to_result(error, {"id": 1}) == Error(error)


class TestResultVariants:
    def test_optional_info_defaults_to_none(self):
        assert Rejected().info is None
        assert Accepted("p").info is None

    def test_results_are_frozen(self):
        with pytest.raises(AttributeError):
            Accepted("p").principal = "q"


class TestAuthenticateOptions:
    def test_default_message(self):
        assert AuthenticateOptions().missing_credentials_message == "Missing credentials"

    def test_override_message(self):
        opts = AuthenticateOptions(bad_request_message="Please sign in")
        assert opts.missing_credentials_message == "Please sign in"

    def test_coerce_none(self):
        assert AuthenticateOptions.coerce(None) == AuthenticateOptions()

    def test_coerce_instance_is_identity(self):
        opts = AuthenticateOptions(bad_request_message="x")
        assert AuthenticateOptions.coerce(opts) is opts

    def test_coerce_camel_case_mapping(self):
        assert AuthenticateOptions.coerce({"badRequestMessage": "m"}).bad_request_message == "m"

    def test_coerce_explicit_none_falls_back_to_camel_case(self):
        options = {"bad_request_message": None, "badRequestMessage": "m"}
        assert AuthenticateOptions.coerce(options).bad_request_message == "m"

    def test_coerce_snake_case_wins_when_both_set(self):
        options = {"bad_request_message": "snake", "badRequestMessage": "camel"}
        assert AuthenticateOptions.coerce(options).bad_request_message == "snake"

    def test_coerce_ignores_unknown_keys(self):
        assert AuthenticateOptions.coerce({"session": False}) == AuthenticateOptions()

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError, match="Unsupported options type"):
            AuthenticateOptions.coerce(["badRequestMessage"])
