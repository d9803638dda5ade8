"""HTTP API for repo-parser."""
