"""Repository reference models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Provider(str, Enum):
    """Git hosting provider."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


class Visibility(str, Enum):
    """Outcome of a visibility lookup.

    UNKNOWN covers every lookup that could not be completed, so callers can
    tell a confirmed public repository apart from one that was never checked.
    """

    PUBLIC = "public"
    PRIVATE = "private"
    UNKNOWN = "unknown"


class RepoMetadata(BaseModel):
    """Structured metadata extracted from a repository reference."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    owner: str
    repo: str
    branch: str | None = None
    commit: str | None = None
    provider: Provider = Provider.GITHUB
    is_private: bool = False


class ParseResult(BaseModel):
    """Result of parsing a repository reference."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    metadata: RepoMetadata
    normalized_url: str
    original_url: str  # after shorthand expansion
    raw_input: str


class ParseOptions(BaseModel):
    """Per-call parse options."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    auth_token: str | None = None


class ValidationResult(BaseModel):
    """Outcome of a format-only validation."""

    success: bool
    error: str | None = None
