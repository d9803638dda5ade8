"""Repository visibility lookup against the GitHub REST API."""

from urllib.parse import quote

import httpx
import structlog

from repo_parser.core.exceptions import LookupFailedError
from repo_parser.core.models.repository import Visibility

logger = structlog.get_logger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github.v3+json"


class GitHubVisibilityClient:
    """Best-effort lookup of whether a GitHub repository is private.

    Every failure (transport error, non-success status, malformed body) is
    logged and reported as ``Visibility.UNKNOWN``; nothing is raised to the
    caller and nothing is retried.

    If ``http_client`` is given it is used as-is and left open. Otherwise a
    client is opened and closed for each lookup.
    """

    def __init__(
        self,
        api_url: str = GITHUB_API_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    async def get_visibility(
        self,
        owner: str,
        repo: str,
        auth_token: str | None = None,
    ) -> Visibility:
        """Look up the visibility of ``owner/repo``."""
        try:
            return await self._fetch_visibility(owner, repo, auth_token)
        except LookupFailedError as e:
            logger.error(e.message, owner=owner, repo=repo, **e.details)
            return Visibility.UNKNOWN

    async def _fetch_visibility(
        self, owner: str, repo: str, auth_token: str | None
    ) -> Visibility:
        path = f"repos/{quote(owner, safe='')}/{quote(repo, safe='')}"
        url = f"{self._api_url}/{path}"
        headers = self._build_headers(auth_token)

        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LookupFailedError(
                "Failed to fetch repository visibility status",
                details={"error": repr(e)},
            ) from e

        if not response.is_success:
            raise LookupFailedError(
                "GitHub API error",
                details={
                    "status": response.status_code,
                    "status_text": response.reason_phrase,
                    "body": response.text,
                },
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LookupFailedError(
                "Malformed GitHub API response",
                details={"error": repr(e), "body": response.text},
            ) from e

        private = data.get("private") if isinstance(data, dict) else None
        if not isinstance(private, bool):
            raise LookupFailedError(
                "GitHub API response has no boolean 'private' field",
                details={"body": response.text},
            )

        return Visibility.PRIVATE if private else Visibility.PUBLIC

    @staticmethod
    def _build_headers(auth_token: str | None) -> dict[str, str]:
        headers = {"Accept": GITHUB_ACCEPT}
        if auth_token:
            headers["Authorization"] = f"token {auth_token}"
        return headers
