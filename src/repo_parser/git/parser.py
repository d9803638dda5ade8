"""Parser for Git repository references."""

import re
from urllib.parse import SplitResult, urlsplit

import structlog

from repo_parser.core.exceptions import InvalidFormatError, MissingOwnerOrRepoError
from repo_parser.core.models.repository import (
    ParseOptions,
    ParseResult,
    Provider,
    RepoMetadata,
    ValidationResult,
    Visibility,
)
from repo_parser.git.providers import detect_provider, match_provider
from repo_parser.git.visibility import GitHubVisibilityClient

logger = structlog.get_logger(__name__)

DEFAULT_HOST = "github.com"

SHORTHAND_PATTERN = re.compile(r"[\w-]+/[\w.-]+", re.ASCII)
BRANCH_PATTERN = re.compile(r"/tree/([\w.-]+)", re.ASCII)
COMMIT_PATTERN = re.compile(r"/commit/([a-f0-9]+)", re.IGNORECASE)


def _split_absolute_url(value: str) -> SplitResult | None:
    """Split ``value`` as an absolute URL, or return None if it is not one."""
    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError on an invalid port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    return parts


class GitRepoParser:
    """Parses repository references into normalized metadata.

    Accepts full web URLs (``https://github.com/owner/repo/tree/main``) and
    the ``owner/repo`` shorthand, which always targets GitHub.
    """

    def __init__(
        self,
        visibility_client: GitHubVisibilityClient | None = None,
        lookup_enabled: bool = True,
    ) -> None:
        self._visibility_client = visibility_client or GitHubVisibilityClient()
        self._lookup_enabled = lookup_enabled

    async def parse(
        self, raw_input: str, options: ParseOptions | None = None
    ) -> ParseResult:
        """Parse a repository reference.

        Raises:
            InvalidFormatError: input is neither a URL nor shorthand.
            MissingOwnerOrRepoError: the path lacks an owner or repo name.
        """
        options = options or ParseOptions()
        self._check_format(raw_input)

        url = self._expand_shorthand(raw_input)
        parts = urlsplit(url)
        host = parts.hostname or ""
        provider = detect_provider(host)
        if ":" in host:
            host = f"[{host}]"  # IPv6 literal

        segments = [segment for segment in parts.path.split("/") if segment]
        owner = segments[0] if segments else ""
        repo = segments[1].removesuffix(".git") if len(segments) > 1 else ""
        if not owner or not repo:
            raise MissingOwnerOrRepoError(details={"url": url})

        branch_match = BRANCH_PATTERN.search(url)
        commit_match = COMMIT_PATTERN.search(url)

        visibility = Visibility.UNKNOWN
        if provider is Provider.GITHUB and self._lookup_enabled:
            visibility = await self._visibility_client.get_visibility(
                owner, repo, auth_token=options.auth_token
            )

        logger.debug(
            "Parsed repository reference",
            provider=provider.value,
            owner=owner,
            repo=repo,
            visibility=visibility.value,
        )

        return ParseResult(
            metadata=RepoMetadata(
                owner=owner,
                repo=repo,
                branch=branch_match.group(1) if branch_match else None,
                commit=commit_match.group(1) if commit_match else None,
                provider=provider,
                is_private=visibility is Visibility.PRIVATE,
            ),
            normalized_url=f"https://{host}/{owner}/{repo}",
            original_url=url,
            raw_input=raw_input,
        )

    def validate(self, raw_input: str) -> ValidationResult:
        """Check the input format only, without raising."""
        try:
            self._check_format(raw_input)
        except InvalidFormatError as e:
            return ValidationResult(success=False, error=e.message)
        return ValidationResult(success=True)

    @staticmethod
    def is_valid_provider(raw_input: str) -> bool:
        """Return True if the input is a URL on a known provider's host.

        Stricter than ``parse``: shorthand and unknown hosts are rejected.
        """
        parts = _split_absolute_url(raw_input)
        if parts is None:
            return False
        return match_provider(parts.hostname or "") is not None

    @staticmethod
    def _check_format(raw_input: str) -> None:
        if "://" in raw_input:
            valid = _split_absolute_url(raw_input) is not None
        else:
            valid = SHORTHAND_PATTERN.fullmatch(raw_input) is not None
        if not valid:
            raise InvalidFormatError(details={"input": raw_input})

    @staticmethod
    def _expand_shorthand(raw_input: str) -> str:
        if "://" in raw_input:
            return raw_input
        return f"https://{DEFAULT_HOST}/{raw_input}"
