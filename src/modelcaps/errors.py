"""Error hierarchy for modelcaps."""
from __future__ import annotations

from typing import Any


class ModelcapsError(Exception):
    """Base error for all modelcaps errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Catalog authoring defects
# ---------------------------------------------------------------------------


class CatalogError(ModelcapsError):
    """A capability record is malformed. Never recoverable at runtime."""

    def __init__(
        self,
        message: str,
        *,
        record: Any = None,
        rule: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.record = record
        self.rule = rule


class MissingFieldError(CatalogError):
    """A required capability field is empty or zero."""


class DuplicateModelError(CatalogError):
    """Two records share the same provider/model_id composite key."""


class ConfigurationError(ModelcapsError):
    """Invalid modelcaps configuration."""


# ---------------------------------------------------------------------------
# Sign-in collaborator failures
# ---------------------------------------------------------------------------


class SignInError(ModelcapsError):
    """Creating a sign-in code failed."""


class ApiError(SignInError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.raw = raw


class AuthenticationError(ApiError):
    """The API rejected our credentials."""


class ServerError(ApiError):
    """Server-side error from the API."""


class RequestTimeoutError(SignInError):
    """A request timed out."""


class NetworkError(SignInError):
    """A network-level error occurred."""


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
) -> ApiError:
    """Map HTTP status code to the appropriate error type."""
    if status_code in (401, 403):
        return AuthenticationError(message, status_code=status_code, raw=raw)
    if 500 <= status_code <= 599:
        return ServerError(message, status_code=status_code, raw=raw)
    return ApiError(message, status_code=status_code, raw=raw)
