"""Reference document store: FastAPI application entry point.

Serves the profile, project and upload endpoints the profile client talks
to, backed by process memory. Intended for local development and tests.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes import router as store_router
from api.routes.health import router as health_router
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown logging."""
    logger.info("store_started", environment=settings.app_env)
    yield
    logger.info("store_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Profile Document Store\n\n"
            "In-memory reference implementation of the endpoints used by the "
            "builder profile page.\n\n"
            "### Endpoints\n"
            "- **Profiles**: `GET`/`PUT /api/profile/{userId}` (full-document replace)\n"
            "- **Projects**: `GET /api/projects?userId=...`\n"
            "- **Uploads**: `POST /api/upload`, served back from `/uploads/{key}`"
        ),
        version="1.0.0",
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profile",
                "description": "Profile document operations",
            },
            {
                "name": "projects",
                "description": "Project summaries by owner",
            },
            {
                "name": "upload",
                "description": "Avatar image storage",
            },
        ],
    )

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(store_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
