"""CLI for repo-parser."""

import asyncio
import sys

import click

from repo_parser.config.logging import configure_logging
from repo_parser.core.exceptions import RepoParserError


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _create_service(lookup: bool = True):
    """Create the parsing service from settings."""
    from repo_parser.config.settings import get_settings
    from repo_parser.services.parsing import RepositoryParsingService

    settings = get_settings()
    if not lookup:
        settings = settings.model_copy(update={"lookup_enabled": False})
    return RepositoryParsingService.from_settings(settings)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """repo-parser: Git repository reference parsing."""
    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("reference")
@click.option("--token", "-t", default=None, help="GitHub token for the visibility lookup")
@click.option("--no-lookup", is_flag=True, help="Skip the visibility lookup")
def parse(reference: str, token: str | None, no_lookup: bool) -> None:
    """Parse a repository URL or owner/repo shorthand.

    Prints the result as JSON.
    """
    service = _create_service(lookup=not no_lookup)
    try:
        result = run_async(service.parse(reference, auth_token=token))
    except RepoParserError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))


@cli.command()
@click.argument("reference")
def validate(reference: str) -> None:
    """Check the format of a repository reference without parsing it."""
    result = _create_service(lookup=False).validate(reference)
    if result.success:
        click.echo("valid")
        return
    click.echo(f"invalid: {result.error}")
    sys.exit(1)


@cli.command()
@click.argument("reference")
def provider(reference: str) -> None:
    """Check whether a URL points at a known Git hosting provider."""
    if _create_service(lookup=False).is_valid_provider(reference):
        click.echo("known provider")
        return
    click.echo("unknown provider")
    sys.exit(1)


@cli.command()
def serve() -> None:
    """Run the HTTP API."""
    from repo_parser.api.main import run

    run()


if __name__ == "__main__":
    cli()
