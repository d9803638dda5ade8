"""Repository parsing service."""

from repo_parser.config.settings import Settings
from repo_parser.core.models.repository import ParseOptions, ParseResult, ValidationResult
from repo_parser.git.parser import GitRepoParser
from repo_parser.git.visibility import GitHubVisibilityClient


class RepositoryParsingService:
    """Service for repository reference parsing.

    Supplies the configured GitHub token when a caller passes none.
    """

    def __init__(self, parser: GitRepoParser, default_token: str | None = None) -> None:
        self._parser = parser
        self._default_token = default_token

    @classmethod
    def from_settings(cls, settings: Settings) -> "RepositoryParsingService":
        """Build the service from application settings."""
        client = GitHubVisibilityClient(
            api_url=settings.github_api_url,
            timeout=settings.lookup_timeout,
        )
        parser = GitRepoParser(
            visibility_client=client,
            lookup_enabled=settings.lookup_enabled,
        )
        return cls(parser=parser, default_token=settings.github_token)

    async def parse(self, url: str, auth_token: str | None = None) -> ParseResult:
        """Parse a repository reference."""
        options = ParseOptions(auth_token=auth_token or self._default_token)
        return await self._parser.parse(url, options)

    def validate(self, url: str) -> ValidationResult:
        return self._parser.validate(url)

    def is_valid_provider(self, url: str) -> bool:
        return self._parser.is_valid_provider(url)
