"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.config import Settings, get_settings
from blog_api.errors import AppError
from blog_api.middleware import access_log_middleware, security_headers_middleware
from blog_api.routers import auth, comments, health, posts, spa, users
from blog_api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Log to stdout (the hosting platform captures it)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """The one error body shape: ``{"message", "statusCode"}``."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, statusCode=status_code).model_dump(),
        headers=headers,
    )


# Global exception handlers
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Typed errors raised by services carry their own status and message."""
    logger.warning(
        f"HTTP {exc.status_code}: {exc.message} - {request.method} {request.url.path}"
    )
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404, 405) in the same shape as everything else."""
    logger.warning(
        f"HTTP {exc.status_code}: {exc.detail} - {request.method} {request.url.path}"
    )
    return error_response(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrong field types."""
    errors = [
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning(
        f"Validation error: {errors} - {request.method} {request.url.path}"
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Unique constraint hit by a write that raced past the service's check."""
    logger.warning(
        f"Integrity error: {exc.orig} - {request.method} {request.url.path}"
    )
    return error_response(status.HTTP_409_CONFLICT, "Resource already exists")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unhandled exceptions. Details stay in the server log."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {exc} - "
        f"{request.method} {request.url.path}",
        exc_info=True,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


async def unhandled_error_middleware(request: Request, call_next):
    """
    Turn unhandled exceptions into 500s inside the middleware stack.

    A handler registered for ``Exception`` alone runs in Starlette's
    outermost ServerErrorMiddleware, so its response would skip the security
    headers, CORS and the access log.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await global_exception_handler(request, exc)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from ``settings`` (environment by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Blog API",
        description="Users, posts and comments with cookie-based sessions",
        version="0.1.0",
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # CORS for frontend dev server
    origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    if settings.frontend_url:
        origins.append(settings.frontend_url)

    # Registered first so it runs innermost
    app.middleware("http")(unhandled_error_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(security_headers_middleware)
    app.middleware("http")(access_log_middleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(posts.router)
    app.include_router(comments.router)

    # Last: catches every GET nothing above matched
    spa.mount_spa(app, settings.client_dist_dir)

    logger.info("Application configured (environment=%s)", settings.environment)
    return app


app = create_app()
