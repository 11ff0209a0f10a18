"""Repository index: the account's repository list as seen by the GitHub API."""

from typing import Any

import httpx

from smartclone.exceptions import AccountNotFoundError, AuthenticationError, NetworkError
from smartclone.logging import get_logger
from smartclone.transport import HTTPTransport
from smartclone.types.config import Credentials, FilterPreferences
from smartclone.types.repos import RepositoryRecord

logger = get_logger("index")

# Only the first page is fetched; accounts with more repositories are truncated.
PAGE_SIZE = 100


def _parse_repository(data: dict[str, Any], owner: str) -> RepositoryRecord:
    """Parse one API entry; only ``name`` is required."""
    return RepositoryRecord(
        name=data["name"],
        owner=owner,
        private=bool(data.get("private", False)),
        fork=bool(data.get("fork", False)),
        language=data.get("language"),
        description=data.get("description"),
    )


def _raise_for_message(payload: dict[str, Any], credentials: Credentials) -> None:
    """Translate a GitHub error object into the matching exception."""
    message = str(payload.get("message", ""))
    if "Not Found" in message:
        raise AccountNotFoundError(credentials.username)
    if "Bad credentials" in message:
        raise AuthenticationError("Invalid GitHub token. Please reconfigure.")
    if message:
        raise NetworkError(f"GitHub API error: {message}")
    raise NetworkError("Failed to fetch repositories from GitHub API: unexpected response")


class RepositoryIndex:
    """Fetches the repository list for a set of credentials."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the index fetcher.

        Args:
            base_url: API root passed through to HTTPTransport
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def fetch(self, credentials: Credentials) -> list[RepositoryRecord]:
        """
        Fetch up to one page of repositories, in the order GitHub returns them.

        With a token the authenticated ``/user/repos`` endpoint is used and
        private repositories are visible; without one the public
        ``/users/<username>/repos`` endpoint is used.

        Args:
            credentials: Account identity and optional token

        Returns:
            List of RepositoryRecord objects

        Raises:
            AuthenticationError: If GitHub rejects the token
            AccountNotFoundError: If the account does not exist
            NetworkError: If the request fails or the response is not a repository list
        """
        if credentials.is_authenticated:
            path = "/user/repos"
            params: dict[str, Any] = {
                "per_page": PAGE_SIZE,
                "sort": "name",
                "affiliation": "owner",
            }
        else:
            path = f"/users/{credentials.username}/repos"
            params = {"per_page": PAGE_SIZE, "sort": "name"}

        with HTTPTransport(
            base_url=self.base_url,
            token=credentials.token,
            timeout=self.timeout,
            transport=self._transport,
        ) as http:
            payload = http.get_json(path, params=params)

        if isinstance(payload, dict):
            _raise_for_message(payload, credentials)

        if not isinstance(payload, list):
            raise NetworkError("Failed to fetch repositories from GitHub API: unexpected response")

        records = []
        for entry in payload:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                logger.warning("Skipping index entry without a name: %r", entry)
                continue
            records.append(_parse_repository(entry, credentials.username))

        if len(payload) >= PAGE_SIZE:
            logger.info("Index truncated to the first %d repositories", PAGE_SIZE)

        logger.debug("Fetched %d repositories for %s", len(records), credentials.username)
        return records


def apply_filters(
    records: list[RepositoryRecord], filters: FilterPreferences
) -> list[RepositoryRecord]:
    """
    Drop repositories excluded by the stored filter preferences.

    Order is preserved. Default preferences keep every record.
    """
    languages = {language.casefold() for language in filters.languages}
    kept = []
    for record in records:
        if record.private and not filters.show_private:
            continue
        if not record.private and not filters.show_public:
            continue
        if record.fork and filters.exclude_forks:
            continue
        if languages and (record.language or "").casefold() not in languages:
            continue
        kept.append(record)
    return kept


__all__ = ["RepositoryIndex", "apply_filters", "PAGE_SIZE"]
