"""Error envelope for the repository API."""

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from repo_parser.core.exceptions import RepoParserError

logger = structlog.get_logger(__name__)

INVALID_REPOSITORY_URL = "INVALID_REPOSITORY_URL"
DEFAULT_MESSAGE = "Failed to parse repository URL"


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body: ``{"error": {"code": ..., "message": ...}}``."""

    error: ErrorDetail


def invalid_repository_response(message: str | None = None) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=INVALID_REPOSITORY_URL, message=message or DEFAULT_MESSAGE)
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def repo_parser_error_handler(request: Request, exc: RepoParserError) -> JSONResponse:
    logger.info("Rejected repository reference", path=request.url.path, error=exc.message)
    return invalid_repository_response(exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies with the same envelope as parse errors."""
    errors = exc.errors()
    message = errors[0].get("msg") if errors else None
    logger.info("Rejected malformed request", path=request.url.path, error=message)
    return invalid_repository_response(message)
