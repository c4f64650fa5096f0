"""
FastAPI application entry point for the Word Substitution Proxy.

This module initializes the FastAPI application with proper configuration,
middleware, error handlers and routing.
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import fetch, health
from app.config import settings
from app.configs.substitution import get_substitution_settings
from app.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from app.models.response import ErrorResponse

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Handles startup and shutdown events.
    """
    substitution = get_substitution_settings()

    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(
        f"Replacing {substitution.target_word!r} with {substitution.substitute_word!r} "
        f"(boundary={substitution.boundary}, parser={substitution.parser})"
    )

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Fetches web pages and replaces a word in their visible text, preserving case",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    setup_middleware(app)
    setup_exception_handlers(app)
    setup_routers(app)
    setup_logging()

    return app


def setup_middleware(app: FastAPI) -> None:
    """
    Configure middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS
    )

    # Added last so it runs first and tags the request id the error handler reports
    app.add_middleware(ErrorHandlingMiddleware)  # type: ignore
    app.add_middleware(LoggingMiddleware)  # type: ignore


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Render HTTP and validation errors as ``{"error": ...}`` bodies.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        messages = [error.get("msg", "Invalid value") for error in exc.errors()]
        logger.debug(f"Rejected request body on {request.url.path}: {messages}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error=f"Invalid request body: {'; '.join(messages)}"
            ).model_dump(exclude_none=True),
        )


def setup_routers(app: FastAPI) -> None:
    """
    Include API routers in the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Web UI route
    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index(request: Request):
        """Serve the web UI."""
        substitution = get_substitution_settings()
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "app_name": settings.APP_NAME,
                "target_word": substitution.target_word,
                "substitute_word": substitution.substitute_word,
            },
        )

    app.include_router(fetch.router, tags=["fetch"])
    app.include_router(health.router, prefix="/api/v1", tags=["health"])


def setup_logging() -> None:
    """
    Configure logging with loguru.
    """
    logger.remove()  # Remove default handler

    logger.add(
        sink=sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.LOG_LEVEL,
        colorize=True
    )

    if settings.ENVIRONMENT == "production":
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)

        logger.add(
            log_dir / "app.log",
            rotation="1 day",
            retention="30 days",
            level=settings.LOG_LEVEL,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )


# Create the FastAPI application instance
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
