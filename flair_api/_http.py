"""Thin HTTP client wrapping requests.Session with client-credentials auth and response handling."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ._exceptions import APIError, AuthenticationError, EmptyBodyError
from ._types import Token

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/vnd.api+json",
    "Content-Type": "application/json",
}

TOKEN_PATH = "/oauth/token"


def _parse_json(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        logger.debug("Non-JSON response body: %s", resp.text[:200])
        return resp.text


def handle_response(resp: requests.Response, *, method: str = "", path: str = "") -> Any:
    """Classify ``resp`` and return its payload.

    2xx (not 204) returns the parsed envelope, unless its ``data`` is explicitly
    null. 204 returns None. >= 400 raises the status-specific ``APIError``.
    Anything else passes through unclassified.
    """
    status = resp.status_code
    if 200 <= status < 300 and status != 204:
        payload = _parse_json(resp)
        if isinstance(payload, dict) and "data" in payload and payload["data"] is None:
            raise EmptyBodyError(status, method=method, path=path)
        return payload

    if status == 204:
        return None

    if status >= 400:
        raise APIError.from_response(resp, method=method, path=path)

    return _parse_json(resp)


class HTTPClient:
    """Minimal HTTP client with lazy bearer-token acquisition. No retries."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str,
        timeout: float | None = 30,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._session = requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._token: Token | None = None

    @property
    def token(self) -> Token | None:
        return self._token

    def _fetch_token(self) -> Token:
        """Exchange the client credentials for a bearer token."""
        logger.debug("Requesting access token from %s%s", self._base_url, TOKEN_PATH)
        resp = self._session.post(
            f"{self._base_url}{TOKEN_PATH}",
            json={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "grant_type": "client_credentials",
            },
            timeout=self._timeout,
        )
        if resp.status_code != 200:
            err = APIError.from_response(resp, method="POST", path=TOKEN_PATH)
            raise AuthenticationError(
                f"Getting access token failed: {err.message}",
                status_code=err.status_code,
                body=err.body,
                json=err.json,
                method="POST",
                path=TOKEN_PATH,
            )
        try:
            token = Token.from_dict(resp.json())
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(
                "Getting access token failed: malformed token response",
                status_code=resp.status_code,
                body=resp.text,
                method="POST",
                path=TOKEN_PATH,
            ) from e
        self._token = token
        return token

    def _ensure_token(self) -> None:
        # Tokens are fetched once and never proactively refreshed.
        if self._token is None:
            self._fetch_token()
        self._session.headers["Authorization"] = self._token.authorization

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send an authenticated request and return the classified payload."""
        self._ensure_token()
        logger.debug("%s %s", method, path)
        try:
            resp = self._session.request(
                method, f"{self._base_url}{path}", timeout=self._timeout, **kwargs
            )
        except requests.RequestException as e:
            if e.response is not None:
                raise APIError.from_response(e.response, method=method, path=path) from e
            logger.warning("%s %s failed: %s", method, path, e)
            raise
        return handle_response(resp, method=method, path=path)
