"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .exceptions import ApplicationError
from .logging_config import setup_logging
from .middleware.logging import LoggingMiddleware
from .routers import images, people
from .schemas import ErrorResponse, HealthResponse
from .services import catalog_service

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, message: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where the API is listening and how many people it can serve."""
    settings: Settings = app.state.settings
    base_url = f"http://localhost:{settings.port}"
    logger.info("Server running at %s", base_url)
    logger.info("All people: %s/people", base_url)
    logger.info("Search: %s/search?q=name", base_url)
    logger.info("Health: %s/health", base_url)
    logger.info(
        "Images available: %d people in %s",
        len(catalog_service.build_catalog(settings.images_dir)),
        settings.images_dir,
    )
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the API for the given settings (environment settings by default)."""
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="People Catalog API",
        description="Read-only people listing built from a directory of images",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Include routers
    app.include_router(people.router)
    app.include_router(images.router)

    @app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(message="Server is running", timestamp=utc_timestamp())

    @app.exception_handler(ApplicationError)
    async def handle_application_error(_: Request, exc: ApplicationError):
        return _error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        # Unknown routes and unsupported methods both read as "no such route"
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _error_response(
                status.HTTP_404_NOT_FOUND,
                "Not found",
                f"Route {request.method} {request.url.path} not found",
            )
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = str(exc) if settings.is_development else "Something went wrong"
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", message
        )

    return app
