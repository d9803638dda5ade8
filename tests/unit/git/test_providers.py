"""Tests for provider detection."""

import pytest

from repo_parser.core.models.repository import Provider
from repo_parser.git.providers import PROVIDER_PATTERNS, detect_provider, match_provider


@pytest.mark.unit
class TestProviderDetection:
    """Tests for match_provider and detect_provider."""

    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            ("github.com", Provider.GITHUB),
            ("www.github.com", Provider.GITHUB),
            ("gitlab.com", Provider.GITLAB),
            ("bitbucket.org", Provider.BITBUCKET),
        ],
    )
    def test_known_hosts(self, host: str, expected: Provider) -> None:
        assert match_provider(host) == expected
        assert detect_provider(host) == expected

    def test_unknown_host_has_no_match(self) -> None:
        assert match_provider("example.com") is None

    def test_unknown_host_falls_back_to_github(self) -> None:
        assert detect_provider("example.com") == Provider.GITHUB

    def test_patterns_are_ordered(self) -> None:
        assert [provider for provider, _ in PROVIDER_PATTERNS] == [
            Provider.GITHUB,
            Provider.GITLAB,
            Provider.BITBUCKET,
        ]

    def test_first_match_wins(self) -> None:
        assert match_provider("gitlab.com.github.com.mirror") == Provider.GITHUB
