"""repo-parser: Git repository reference parsing service."""

__version__ = "0.1.0"
