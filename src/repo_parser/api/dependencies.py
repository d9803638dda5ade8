"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from repo_parser.config import get_settings
from repo_parser.services.parsing import RepositoryParsingService


async def get_parsing_service(request: Request) -> RepositoryParsingService:
    """Get the parsing service from app state."""
    if hasattr(request.app.state, "parsing_service"):
        return request.app.state.parsing_service

    # Initialize on first request
    service = RepositoryParsingService.from_settings(get_settings())
    request.app.state.parsing_service = service
    return service


# Type aliases for dependency injection
ParsingServiceDep = Annotated[RepositoryParsingService, Depends(get_parsing_service)]
