"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from threads.adapter.error import BackendError, RecordNotFoundError
from threads.config import Settings
from threads.interface.api.routes import (
    auth,
    comments,
    communities,
    health,
    posts,
    search,
    users,
    votes,
)
from threads.util.di.container import create_container, setup_di
from threads.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes the backend HTTP client
    await app.state.dishka_container.close()


async def handle_record_not_found(
    request: Request, exc: RecordNotFoundError
) -> JSONResponse:
    logfire.warn(
        "Backend record not found",
        collection=exc.collection,
        record_id=exc.record_id,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def handle_backend_error(request: Request, exc: BackendError) -> JSONResponse:
    logfire.error(
        "Backend request failed",
        error=str(exc),
        backend_status=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Backend service unavailable"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    # Instrument httpx for outbound backend requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Threads API",
        description="Backend API for Threads - communities, posts and nested comment threads",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(RecordNotFoundError, handle_record_not_found)
    app_instance.add_exception_handler(BackendError, handle_backend_error)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(search.router)
    app_instance.include_router(communities.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
