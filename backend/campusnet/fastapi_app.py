"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- profile, teachers, domains, papers, messages, blobs, health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from campusnet import __version__
from campusnet.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from campusnet.config.settings import Config, get_config
from campusnet.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DependencyFailureError,
    DomainValidationError,
    EntityNotFoundError,
)
from campusnet.presentation.api import (
    blobs_router,
    domains_router,
    messages_router,
    papers_router,
    profiles_router,
    teachers_router,
)
from campusnet.setup.ioc.container import AppProvider, create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)

# Domain exception → HTTP status
ERROR_STATUS: dict[type[Exception], int] = {
    EntityNotFoundError: 404,
    AccessDeniedError: 403,
    DomainValidationError: 422,
    DependencyFailureError: 502,
    AuthenticationError: 401,
}


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_fastapi_app(
    container: Optional[AsyncContainer] = None,
    config: Optional[type[Config]] = None,
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use; defaults to one built from config.
            Tests pass a container with in-memory adapters.
        config: Settings profile; defaults to get_config() (APP_ENV)

    Returns:
        FastAPI application instance
    """
    # Container must exist before startup because Dishka adds middleware
    config = config or get_config()
    if container is None:
        container = create_container(AppProvider(config=config))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[App] Campus network API started")
        yield
        # Closes the Redis connection when KV_BACKEND=redis
        await container.close()
        logger.info("[App] Campus network API shut down, DI container closed")

    app = FastAPI(
        title="Campus Research Network API",
        description="Profiles, research domains, papers and messaging over a key-value store",
        version=__version__,
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def domain_error_response(exc: Exception, status_code: int) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={"error": str(exc), "kind": getattr(exc, "kind", type(exc).__name__)},
        )

    def register_domain_handler(exc_class: type[Exception], status_code: int) -> None:
        async def handler(request: Request, exc: Exception):
            log = logger.error if status_code >= 500 else logger.info
            log(f"[HTTP {status_code}] {request.method} {request.url.path}: {exc}")
            return domain_error_response(exc, status_code)

        app.add_exception_handler(exc_class, handler)

    for exc_class, status_code in ERROR_STATUS.items():
        register_domain_handler(exc_class, status_code)

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"[VALIDATION ERROR] {errors}")
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation error",
                "kind": DomainValidationError.kind,
                "details": jsonable_errors(errors),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Internal server error: {str(exc)}"},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy", "kv_backend": config.KV_BACKEND}

    app.include_router(profiles_router)  # /profile
    app.include_router(teachers_router)  # /teachers
    app.include_router(domains_router)  # /domains
    app.include_router(papers_router)  # /papers
    app.include_router(messages_router)  # /messages
    app.include_router(blobs_router)  # /blobs/{path}?token=

    return app


def jsonable_errors(errors) -> list[dict]:
    """Pydantic error dicts may carry exception objects in `ctx`."""
    return [
        jsonable_encoder(
            {key: (str(value) if key == "ctx" else value) for key, value in error.items()}
        )
        for error in errors
    ]


# Create the app instance
app = create_fastapi_app()
