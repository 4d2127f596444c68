"""
Sample App Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       exception handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn sample_app.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────┐ ┌────────────────────────┐ ┌─────────┐   │
    │  │ GET / │ │ /api/hello|status|data │ │ /health │   │
    │  └───────┘ └────────────────────────┘ └─────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ NotFound→404 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Error body format:
    Every error response is `{"error": "<human-readable message>"}`.
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sample_app import __version__
from sample_app.config import settings
from sample_app.exceptions import NotFoundError, ValidationError
from sample_app.middleware.logging import RequestLoggingMiddleware
from sample_app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from sample_app.routes import api, health, root

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Sets up logging with a consistent format across all modules.
    When:    Called once during app startup (before any other initialization).

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,  # Override any existing logging config
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown logging.

    There are no resources to open or close; the start timestamp used for
    uptime is captured in create_app() so it exists even when the server
    is driven without a lifespan (e.g. ASGI test transports).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s v%s starting up...", settings.app_name, __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    logger.info("%s shutting down...", settings.app_name)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the `{"error": message}` body shared by every error path."""
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_error(exc: RequestValidationError) -> ValidationError:
    """
    Turn FastAPI's RequestValidationError into our ValidationError.

    Only the first error is reported. The location prefix "body" is dropped so
    the message names the field the client actually sent (e.g. "text").
    """
    errors = exc.errors()
    if not errors:
        return ValidationError(message="Invalid request")

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or None
    error_type = first.get("type", "")

    if error_type == "json_invalid":
        message = "Request body must be valid JSON"
    elif field is None:
        message = "Request body must be a JSON object with a 'text' field"
    elif error_type == "missing":
        message = f"Field '{field}' is required"
    elif error_type == "string_type":
        message = f"Field '{field}' must be a string"
    else:
        message = f"Field '{field}': {first.get('msg', 'invalid value')}"

    return ValidationError(message=message, field=field, context={"type": error_type})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 400 Bad Request
        RequestValidationError   → 400 Bad Request (via ValidationError)
        NotFoundError            → 404 Not Found
        HTTPException 404 / 405  → 404 Not Found (via NotFoundError)
        HTTPException (other)    → its own status code
        Exception (fallback)     → 500 Internal Server Error

    Exception handlers never expose stack traces in the response; those are
    logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent invalid input; tell them what's wrong."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return await handle_validation_error(request, describe_validation_error(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # 405 too: routing is by exact method + path, so a wrong method is unmatched
        if exc.status_code in (404, 405):
            return await handle_not_found(
                request, NotFoundError(method=request.method, path=request.url.path)
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Runs in ServerErrorMiddleware, outside RequestIDMiddleware: the
        ContextVar is already reset and the response would miss the header,
        so the ID is read back from request.state (shared via the ASGI scope).
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        response = error_response(500, "Internal server error")
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.

    The start timestamp for GET /api/status is captured here, once per app
    instance, and is never written again.
    """
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Minimal demo service: welcome, greeting, status and uppercase transform.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        # Exact path match: "/health/" is a 404, not a 307 to "/health"
        redirect_slashes=False,
    )
    app.state.started_at = time.monotonic()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added runs first).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(api.router)
    app.include_router(health.router)

    return app


# uvicorn expects `sample_app.main:app` to be importable
app = create_app()
