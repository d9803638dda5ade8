"""Business logic services for repo-parser."""

from repo_parser.services.parsing import RepositoryParsingService

__all__ = [
    "RepositoryParsingService",
]
