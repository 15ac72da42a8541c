"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookmark_api.api import auth, bookmarks, users
from bookmark_api.config import Settings, get_settings
from bookmark_api.database import Database
from bookmark_api.exceptions import ServiceError, UnauthenticatedError
from bookmark_api.services.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def service_error_handler(
    request: Request,  # noqa: ARG001
    exc: ServiceError,
) -> JSONResponse:
    """Translate service errors into their HTTP status and safe message."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def validation_error_handler(
    request: Request,  # noqa: ARG001
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed or missing request fields as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic 500."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and its shared resources from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    database = Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        logger.info(f"Starting bookmark API ({settings.environment})")
        yield
        database.dispose()

    app = FastAPI(
        title="Bookmark API",
        description="Personal bookmarks with email and password accounts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.password_hasher = PasswordHasher()
    app.state.token_service = TokenService.from_settings(settings)

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(bookmarks.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app
