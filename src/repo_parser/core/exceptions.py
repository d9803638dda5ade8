"""Exception hierarchy for repo-parser."""

from typing import Any


class RepoParserError(Exception):
    """Base exception for all repo-parser errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(RepoParserError):
    """The input is not a usable repository reference."""


class InvalidFormatError(ValidationError):
    """Input is neither an absolute URL nor owner/repo shorthand."""

    def __init__(
        self,
        message: str = "Invalid Git repository URL format",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class MissingOwnerOrRepoError(ValidationError):
    """The URL path did not yield both an owner and a repository name."""

    def __init__(
        self,
        message: str = "Invalid repository URL: missing owner or repository name",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class LookupFailedError(RepoParserError):
    """The visibility lookup could not be completed.

    Raised and handled inside the visibility client only.
    """
