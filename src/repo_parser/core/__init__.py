"""Core domain models and interfaces for repo-parser."""

from repo_parser.core.exceptions import (
    InvalidFormatError,
    LookupFailedError,
    MissingOwnerOrRepoError,
    RepoParserError,
    ValidationError,
)
from repo_parser.core.models import (
    ParseOptions,
    ParseResult,
    Provider,
    RepoMetadata,
    ValidationResult,
    Visibility,
)

__all__ = [
    # Models
    "Provider",
    "Visibility",
    "RepoMetadata",
    "ParseResult",
    "ParseOptions",
    "ValidationResult",
    # Exceptions
    "RepoParserError",
    "ValidationError",
    "InvalidFormatError",
    "MissingOwnerOrRepoError",
    "LookupFailedError",
]
