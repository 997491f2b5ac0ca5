"""
Tuiter Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds (or receives) the AppContext, installs middleware
       and exception handlers, and mounts every controller plus the
       operational routes.
Who:   uvicorn imports `tuiter.main:app`; tests call create_app(context).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Controllers (via AppContext):                      │
    │    users · tuits · likes · follows · bookmarks ·    │
    │    messages                                         │
    │  Routes: /health · /hello · /add/{a}/{b}            │
    │                                                     │
    │  Exception Handlers:                                │
    │    TuiterError→its status_code (400 / 404 / 500)    │
    │    RequestValidationError→422 │ other→500           │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → optional create_all
    Shutdown: dispose the engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from tuiter import __version__
from tuiter.config import Settings, get_settings
from tuiter.context import AppContext
from tuiter.database import create_tables, dispose_engine
from tuiter.exceptions import TuiterError
from tuiter.middleware.logging import RequestLoggingMiddleware
from tuiter.middleware.request_id import HEADER, RequestIDMiddleware, request_id_var
from tuiter.routes import health, hello

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Third-party loggers that log every operation are raised to WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate database credentials (logged, not fatal)
        3. Create tables when CREATE_TABLES is set
    Shutdown:
        1. Dispose the database engine
    """
    context: AppContext = app.state.context
    settings = context.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings)
    logger.info("Tuiter Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health reports the database as unreachable
        logger.error("Configuration error: %s", str(e))

    if settings.create_tables:
        await create_tables(context.engine)
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Tuiter Backend shutting down...")
    await dispose_engine(context.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(
    error: str, message: str, details: Any = None, request_id: Optional[str] = None
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    body["requestId"] = request_id if request_id is not None else request_id_var.get()
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to status codes and the ErrorResponse body.

        TuiterError and subclasses  → exc.status_code (400 / 404 / 500)
        RequestValidationError      → 422, per-field errors in `details`
        Exception (fallback)        → 500 internal_server_error

    Stack traces, SQL and driver messages are logged, never returned.
    """

    @app.exception_handler(TuiterError)
    async def handle_tuiter_error(request: Request, exc: TuiterError):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level, "[%s] %s %s: %s | Context: %s", request_id_var.get(),
            request.method, request.url.path, exc.message, exc.context,
        )
        details = exc.context if exc.expose_context else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_code, exc.public_message, details),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = [
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning(
            "[%s] Malformed request to %s: %d error(s)",
            request_id_var.get(), request.url.path, len(errors),
        )
        return JSONResponse(
            status_code=422,
            content=_error_body("validation_error", "The request payload is invalid", errors),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside the middleware stack, so the id header is added here
        rid = getattr(request.state, "request_id", None) or request_id_var.get()
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                request_id=rid,
            ),
            headers={HEADER: rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        context: collaborators to serve from. Built from the environment
                 when omitted; tests pass one bound to an in-memory database.

    Returns:
        Fully configured FastAPI instance.
    """
    if context is None:
        context = AppContext(get_settings())
    settings = context.settings

    app = FastAPI(
        title="Tuiter API",
        description="RESTful Web services for users, tuits, likes, follows, bookmarks and messages.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.context = context

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    context.register_controllers(app)
    app.include_router(health.router)
    app.include_router(hello.router)

    return app


app = create_app()
