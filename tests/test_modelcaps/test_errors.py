"""Tests for modelcaps.errors."""
from __future__ import annotations

import pytest

from modelcaps.errors import (
    ApiError,
    AuthenticationError,
    CatalogError,
    ConfigurationError,
    DuplicateModelError,
    MissingFieldError,
    ModelcapsError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
    SignInError,
    error_from_status_code,
)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestModelcapsError:
    def test_message(self) -> None:
        assert str(ModelcapsError("boom")) == "boom"

    def test_cause_default_none(self) -> None:
        assert ModelcapsError("boom").cause is None

    def test_cause_set(self) -> None:
        orig = ValueError("original")
        assert ModelcapsError("wrapped", cause=orig).cause is orig


class TestCatalogError:
    def test_carries_record_and_rule(self) -> None:
        err = CatalogError("bad", record={"a": 1}, rule="check_x")
        assert err.record == {"a": 1}
        assert err.rule == "check_x"

    @pytest.mark.parametrize("cls", [MissingFieldError, DuplicateModelError])
    def test_subclasses(self, cls: type) -> None:
        assert issubclass(cls, CatalogError)
        assert issubclass(cls, ModelcapsError)

    def test_not_a_sign_in_error(self) -> None:
        assert not issubclass(CatalogError, SignInError)


class TestSignInErrors:
    @pytest.mark.parametrize(
        "cls", [ApiError, AuthenticationError, ServerError, NetworkError, RequestTimeoutError]
    )
    def test_are_sign_in_errors(self, cls: type) -> None:
        assert issubclass(cls, SignInError)

    def test_status_errors_carry_no_retry_hint(self) -> None:
        err = ServerError("down", status_code=503)
        assert err.status_code == 503
        assert not hasattr(err, "retryable")

    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, ModelcapsError)


# ---------------------------------------------------------------------------
# error_from_status_code
# ---------------------------------------------------------------------------


class TestErrorFromStatusCode:
    @pytest.mark.parametrize("status", [401, 403])
    def test_auth(self, status: int) -> None:
        err = error_from_status_code(status, "nope")
        assert isinstance(err, AuthenticationError)
        assert err.status_code == status

    @pytest.mark.parametrize("status", [500, 503])
    def test_server(self, status: int) -> None:
        assert isinstance(error_from_status_code(status, "down"), ServerError)

    def test_other(self) -> None:
        err = error_from_status_code(404, "missing", raw={"error": "missing"})
        assert type(err) is ApiError
        assert err.raw == {"error": "missing"}
        assert str(err) == "missing"
