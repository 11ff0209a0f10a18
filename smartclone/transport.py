"""
HTTP Transport for SmartClone.

Handles HTTP communication with the GitHub REST API: authentication
headers, request/response logging and JSON decoding. Requests are never
retried; a failed call surfaces immediately.
"""

import os
import time
from typing import Any

import httpx

from smartclone import __version__
from smartclone.exceptions import NetworkError
from smartclone.logging import log_http_request, log_http_response

API_URL_ENV_VAR = "SMARTCLONE_API_URL"
DEFAULT_API_URL = "https://api.github.com"


class HTTPTransport:
    """
    Thin synchronous wrapper over ``httpx.Client``.

    Handles:
    - ``Authorization: token <token>`` when a token is configured
    - GitHub media type and User-Agent headers
    - Transport failures and undecodable bodies as ``NetworkError``
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: API root (default: SMARTCLONE_API_URL or https://api.github.com)
            token: Personal access token; empty for anonymous access
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        if base_url is None:
            base_url = os.environ.get(API_URL_ENV_VAR, DEFAULT_API_URL)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"smartclone/{__version__}",
        }
        if token:
            headers["Authorization"] = f"token {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self._client.headers

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Error statuses are not raised here: GitHub describes failures in a
        ``message`` field and callers classify that payload themselves.

        Args:
            path: API path (e.g., "/user/repos")
            params: Query parameters

        Returns:
            Decoded JSON body (list or dict)

        Raises:
            NetworkError: If the request fails or the body is empty or not JSON
        """
        url = f"{self.base_url}{path}"
        log_http_request("GET", url, headers=dict(self._client.headers), params=params)

        started = time.monotonic()
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch repositories from GitHub API: {e}") from e
        elapsed_ms = (time.monotonic() - started) * 1000

        if not response.content.strip():
            log_http_response(response.status_code, url, elapsed_ms=elapsed_ms)
            raise NetworkError(
                f"Failed to fetch repositories from GitHub API: empty response (HTTP {response.status_code})"
            )

        try:
            data = response.json()
        except ValueError as e:
            log_http_response(response.status_code, url, elapsed_ms=elapsed_ms)
            raise NetworkError(
                f"Failed to fetch repositories from GitHub API: unparseable response (HTTP {response.status_code})"
            ) from e

        log_http_response(
            response.status_code,
            url,
            items=len(data) if isinstance(data, list) else None,
            elapsed_ms=elapsed_ms,
        )
        return data
