"""Configuration for repo-parser."""

from repo_parser.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
