"""Tests for the GitHub visibility lookup."""

import httpx
import pytest
from structlog.testing import capture_logs

from repo_parser.core.models.repository import Visibility
from repo_parser.git.visibility import GitHubVisibilityClient


@pytest.mark.unit
class TestGitHubVisibilityClient:
    """Tests for GitHubVisibilityClient."""

    @pytest.mark.asyncio
    async def test_public_repository(self, visibility_client, github_api) -> None:
        github_api.returns(200, json={"private": False})
        assert await visibility_client.get_visibility("user", "repo") == Visibility.PUBLIC

    @pytest.mark.asyncio
    async def test_private_repository(self, visibility_client, github_api) -> None:
        github_api.returns(200, json={"private": True})
        assert await visibility_client.get_visibility("user", "repo") == Visibility.PRIVATE

    @pytest.mark.asyncio
    async def test_request_shape(self, visibility_client, github_api) -> None:
        await visibility_client.get_visibility("user", "repo")

        assert len(github_api.requests) == 1
        request = github_api.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "https://api.github.com/repos/user/repo"
        assert request.headers["Accept"] == "application/vnd.github.v3+json"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_auth_token_header(self, visibility_client, github_api) -> None:
        await visibility_client.get_visibility("user", "repo", auth_token="secret")
        assert github_api.requests[0].headers["Authorization"] == "token secret"

    @pytest.mark.asyncio
    async def test_custom_api_url(self, http_client, github_api) -> None:
        client = GitHubVisibilityClient(
            api_url="https://ghe.example.com/api/v3/", http_client=http_client
        )
        await client.get_visibility("org", "tool")
        assert str(github_api.requests[0].url) == "https://ghe.example.com/api/v3/repos/org/tool"

    @pytest.mark.asyncio
    async def test_path_segments_are_encoded(self, visibility_client, github_api) -> None:
        await visibility_client.get_visibility("a b", "c/d")
        assert github_api.requests[0].url.raw_path == b"/repos/a%20b/c%2Fd"

    @pytest.mark.asyncio
    async def test_unsendable_url_is_unknown(self, http_client) -> None:
        client = GitHubVisibilityClient(
            api_url="https://api.git\x7fhub.com", http_client=http_client
        )

        with capture_logs() as logs:
            result = await client.get_visibility("user", "repo")

        assert result == Visibility.UNKNOWN
        assert logs[0]["event"] == "Failed to fetch repository visibility status"

    @pytest.mark.asyncio
    async def test_error_status_is_unknown(self, visibility_client, github_api) -> None:
        github_api.returns(404, text='{"message": "Not Found"}')

        with capture_logs() as logs:
            result = await visibility_client.get_visibility("user", "repo")

        assert result == Visibility.UNKNOWN
        assert logs[0]["log_level"] == "error"
        assert logs[0]["status"] == 404
        assert logs[0]["status_text"] == "Not Found"
        assert logs[0]["body"] == '{"message": "Not Found"}'

    @pytest.mark.asyncio
    async def test_transport_error_is_unknown(self, visibility_client, github_api) -> None:
        github_api.raises(httpx.ConnectError)

        with capture_logs() as logs:
            result = await visibility_client.get_visibility("user", "repo")

        assert result == Visibility.UNKNOWN
        assert logs[0]["event"] == "Failed to fetch repository visibility status"
        assert "API Error" in logs[0]["error"]

    @pytest.mark.asyncio
    async def test_malformed_json_is_unknown(self, visibility_client, github_api) -> None:
        github_api.returns(200, text="<html>not json</html>")
        assert await visibility_client.get_visibility("user", "repo") == Visibility.UNKNOWN

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"private": "yes"}, [True], {"private": None}])
    async def test_missing_private_field_is_unknown(
        self, visibility_client, github_api, body
    ) -> None:
        github_api.returns(200, json=body)
        assert await visibility_client.get_visibility("user", "repo") == Visibility.UNKNOWN

    @pytest.mark.asyncio
    async def test_no_retry(self, visibility_client, github_api) -> None:
        github_api.returns(500, text="boom")
        await visibility_client.get_visibility("user", "repo")
        assert len(github_api.requests) == 1

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self, visibility_client, http_client) -> None:
        await visibility_client.get_visibility("user", "repo")
        assert not http_client.is_closed
