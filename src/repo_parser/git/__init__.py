"""Git repository reference parsing."""

from repo_parser.git.parser import GitRepoParser
from repo_parser.git.providers import detect_provider, match_provider
from repo_parser.git.visibility import GitHubVisibilityClient

__all__ = [
    "GitRepoParser",
    "GitHubVisibilityClient",
    "detect_provider",
    "match_provider",
]
