"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from repo_parser import __version__
from repo_parser.api.errors import repo_parser_error_handler, request_validation_error_handler
from repo_parser.api.routers import health, repo
from repo_parser.config import get_settings
from repo_parser.config.logging import configure_logging
from repo_parser.core.exceptions import RepoParserError

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )
    logger.info(
        "repo-parser starting",
        version=__version__,
        environment=settings.environment,
        github_api_url=settings.github_api_url,
        lookup_enabled=settings.lookup_enabled,
    )

    yield

    logger.info("repo-parser stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="repo-parser",
        description="Git repository reference parsing",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RepoParserError, repo_parser_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(repo.router, prefix="/api", tags=["Repository"])

    return app


# Create default app instance
app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "repo_parser.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        workers=settings.api_workers,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
