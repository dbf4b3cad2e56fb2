"""
Album Service Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       holding its own seeded AlbumStore.
Who:   Called by uvicorn (`uvicorn album_api.main:app`) and by the tests.
When:  Once at server startup; the returned app handles all requests.

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
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ GET /albums  │ │ POST /albums │ │ GET /health │  │
    │  │ GET /albums/ │ └──────────────┘ └─────────────┘  │
    │  │   {album_id} │                                   │
    │  └──────────────┘                                   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ Decode→500 │ Unexpected→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from album_api import __version__
from album_api.config import settings
from album_api.exceptions import AlbumNotFoundError
from album_api.middleware.logging import RequestLoggingMiddleware
from album_api.middleware.request_id import RequestIDMiddleware, request_id_var
from album_api.routes import albums, health
from album_api.services.album_store import AlbumStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure application logging.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (Docker captures stdout)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging and announce the seeded store on startup."""
    setup_logging()
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info("Album store seeded with %d albums", await app.state.album_store.count())
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # Albums are held in memory only; they are discarded here.
    logger.info("%s shutting down.", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def summarize_decode_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Build a one-line description of the first decode error.

    Example: "body.price: Input should be a valid number"
    """
    if not errors:
        return "request body could not be decoded"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    detail = (first.get("ctx") or {}).get("error")
    if first.get("type") == "json_invalid" and detail:
        msg = f"{msg} ({detail})"
    return f"{loc}: {msg}" if loc else msg


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler map:
        AlbumNotFoundError      → 404 {"message": "album not found"}
        RequestValidationError  → 500 {"error": ..., "details": [...]}
        Exception (fallback)    → 500 generic message, traceback logged
    """

    @app.exception_handler(AlbumNotFoundError)
    async def handle_not_found(request: Request, exc: AlbumNotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Album not found: %s", rid, exc.album_id)
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_decode_error(request: Request, exc: RequestValidationError):
        """The body could not be decoded into an album; nothing was stored."""
        rid = request_id_var.get("")
        # Offending values stay out of the body: a NaN input cannot be rendered as JSON
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in jsonable_encoder(exc.errors())
        ]
        summary = summarize_decode_errors(errors)
        logger.warning("[%s] Rejected %s %s: %s", rid, request.method, request.url.path, summary)
        return JSONResponse(
            status_code=500,
            content={"error": summary, "details": errors},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every call builds a fresh, independently seeded AlbumStore and attaches
    it to `app.state.album_store`, where the `get_album_store` dependency
    finds it.
    """
    app = FastAPI(
        title=settings.app_name,
        description="In-memory album records: list, look up by id, and add.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.album_store = AlbumStore.seeded()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added runs first).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(albums.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "album_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `album_api.main:app` to be importable
app = create_app()
