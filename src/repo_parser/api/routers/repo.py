"""Repository reference API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from repo_parser.api.dependencies import ParsingServiceDep
from repo_parser.api.errors import ErrorResponse
from repo_parser.core.models.repository import ParseResult

router = APIRouter(prefix="/repo")


class ParseRepositoryRequest(BaseModel):
    """Request model for the parse endpoint."""

    url: str = Field(..., description="Repository URL or owner/repo shorthand")


@router.post(
    "",
    response_model=ParseResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def parse_repository(
    request: ParseRepositoryRequest,
    service: ParsingServiceDep,
) -> ParseResult:
    """Parse a repository reference into normalized metadata."""
    return await service.parse(request.url)
