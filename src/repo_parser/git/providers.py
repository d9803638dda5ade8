"""Git hosting provider detection."""

import re

from repo_parser.core.models.repository import Provider

# Evaluated in order; the first pattern found in the host wins.
PROVIDER_PATTERNS: tuple[tuple[Provider, re.Pattern[str]], ...] = (
    (Provider.GITHUB, re.compile(r"github\.com")),
    (Provider.GITLAB, re.compile(r"gitlab\.com")),
    (Provider.BITBUCKET, re.compile(r"bitbucket\.org")),
)

DEFAULT_PROVIDER = Provider.GITHUB


def match_provider(host: str) -> Provider | None:
    """Return the first provider whose pattern occurs in ``host``, if any."""
    for provider, pattern in PROVIDER_PATTERNS:
        if pattern.search(host):
            return provider
    return None


def detect_provider(host: str) -> Provider:
    """Detect the provider for ``host``, falling back to GitHub.

    Unrecognized hosts are still treated as usable references.
    """
    return match_provider(host) or DEFAULT_PROVIDER
