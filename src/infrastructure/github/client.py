"""GitHub REST API adapter for the profile repository showcase."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import settings
from core.exceptions import GitHubProfileNotFoundError

logger = structlog.get_logger()

RECENT_REPOS_LIMIT = 5


class GitHubClient:
    """Fetch a user's most recently created public repositories."""

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        client_id: str = settings.github_client_id,
        client_secret: str = settings.github_client_secret,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = (client_id, client_secret) if client_id and client_secret else None
        self._timeout = timeout
        self._transport = transport

    async def get_recent_repos(self, username: str) -> list[dict[str, Any]]:
        """
        Return the user's newest repositories as GitHub sent them.

        Raises:
            GitHubProfileNotFoundError: If GitHub answers with anything but 200
            httpx.HTTPError: On transport failures
        """
        async with httpx.AsyncClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "User-Agent": settings.app_name,
                "Accept": "application/vnd.github+json",
            },
        ) as client:
            response = await client.get(
                f"/users/{quote(username, safe='')}/repos",
                params={
                    "per_page": RECENT_REPOS_LIMIT,
                    "sort": "created",
                    "direction": "desc",
                },
            )

        if response.status_code != 200:
            logger.info(
                "github_repos_not_found",
                username=username,
                upstream_status=response.status_code,
            )
            raise GitHubProfileNotFoundError(username, response.status_code)

        repos: list[dict[str, Any]] = response.json()
        return repos
