"""Pytest configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from repo_parser.git.parser import GitRepoParser
from repo_parser.git.visibility import GitHubVisibilityClient


class FakeGitHubAPI:
    """In-memory stand-in for the GitHub repository endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={"private": False})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def returns(self, status_code: int = 200, **kwargs) -> None:
        self.respond = lambda request: httpx.Response(status_code, **kwargs)

    def raises(self, error: type[httpx.HTTPError] = httpx.ConnectError) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise error("API Error", request=request)

        self.respond = _raise


@pytest.fixture
def github_api() -> FakeGitHubAPI:
    """Create a fake GitHub API that answers every request as public."""
    return FakeGitHubAPI()


@pytest.fixture
async def http_client(github_api: FakeGitHubAPI) -> httpx.AsyncClient:
    """Create an HTTP client routed to the fake GitHub API."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(github_api.handler))
    yield client
    await client.aclose()


@pytest.fixture
def visibility_client(http_client: httpx.AsyncClient) -> GitHubVisibilityClient:
    """Create a visibility client backed by the fake GitHub API."""
    return GitHubVisibilityClient(http_client=http_client)


@pytest.fixture
def parser(visibility_client: GitHubVisibilityClient) -> GitRepoParser:
    """Create a parser whose lookups hit the fake GitHub API."""
    return GitRepoParser(visibility_client=visibility_client)
