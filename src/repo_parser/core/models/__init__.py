"""Domain models for repo-parser."""

from repo_parser.core.models.repository import (
    ParseOptions,
    ParseResult,
    Provider,
    RepoMetadata,
    ValidationResult,
    Visibility,
)

__all__ = [
    "Provider",
    "Visibility",
    "RepoMetadata",
    "ParseResult",
    "ParseOptions",
    "ValidationResult",
]
