"""Typed error hierarchy for the Flair API client."""

from __future__ import annotations

import json as _json
from typing import Any

import requests


class FlairError(Exception):
    """Base exception for all Flair client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyBodyError(FlairError):
    """Success status, but the envelope's primary data was null."""

    def __init__(self, status_code: int, method: str | None = None, path: str | None = None):
        super().__init__(f"EmptyBodyError<HTTP Response: {status_code}>")
        self.status_code = status_code
        self.method = method
        self.path = path


class APIError(FlairError):
    """Status >= 400. Carries the raw body and, when parseable, its JSON."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        json: Any = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.json = json
        self.method = method
        self.path = path

    @classmethod
    def from_response(
        cls, resp: requests.Response, *, method: str | None = None, path: str | None = None
    ) -> APIError:
        """Build the status-specific error for ``resp``."""
        body = resp.text
        try:
            parsed = _json.loads(body) if body else None
        except ValueError:
            parsed = None
        exc_cls = STATUS_MAP.get(resp.status_code, APIError)
        return exc_cls(
            _error_message(parsed, resp.status_code),
            status_code=resp.status_code,
            body=body,
            json=parsed,
            method=method,
            path=path,
        )


def _error_message(parsed: Any, status_code: int) -> str:
    # JSON-API error objects: {"errors": [{"title", "detail", ...}]}
    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            detail = errors[0].get("detail") or errors[0].get("title")
            if detail:
                return f"HTTP {status_code}: {detail}"
    return f"HTTP {status_code}"


class ValidationError(APIError):
    """400/422: the request was rejected as invalid."""


class AuthenticationError(APIError):
    """401, a failed token exchange, or missing client credentials."""


class PermissionDeniedError(APIError):
    """403: the token lacks the required scope."""


class NotFoundError(APIError):
    """404: resource does not exist."""


class ConflictError(APIError):
    """409: resource conflicts with server state."""


class RateLimitError(APIError):
    """429: too many requests."""


class ResourceStateError(FlairError):
    """A resource operation was attempted without a client, an id, or after deletion.

    Raised locally; no request is sent.
    """


class MissingIdError(ResourceStateError):
    """The resource has no id, so it cannot be referenced."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[APIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}
