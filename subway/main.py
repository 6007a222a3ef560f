"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subway import __version__
from subway.api import lines, stations
from subway.api.errors import subway_error_handler
from subway.core.config import require_config, settings
from subway.core.logging import configure_logging
from subway.core.store import get_store_instance
from subway.middleware import AccessLoggingMiddleware
from subway.models.errors import SubwayError
from subway.schemas.health import HealthResponse, RootResponse

# Configure logging at module level so Uvicorn startup logs go through structlog pipeline
configure_logging(log_level=settings.LOG_LEVEL)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - validate configuration and create the in-memory store on startup."""
    require_config("API_V1_PREFIX", "PROJECT_NAME")
    store = get_store_instance()
    logger.info(
        "startup_complete",
        debug=settings.DEBUG,
        lines=len(store.lines.list()),
        stations=len(store.stations.list()),
    )
    yield
    logger.info("shutdown_complete")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description="Subway line and section management",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Access logging middleware (replaces uvicorn.access logs with structlog)
app.add_middleware(AccessLoggingMiddleware)

# Domain errors carry their kind; one handler maps kinds to status codes
app.add_exception_handler(SubwayError, subway_error_handler)  # type: ignore[arg-type]

app.include_router(stations.router, prefix=settings.API_V1_PREFIX)
app.include_router(lines.router, prefix=settings.API_V1_PREFIX)


@app.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """Root endpoint."""
    return RootResponse(message=f"{settings.PROJECT_NAME} API", version=__version__)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@app.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness check endpoint - the store is reachable."""
    get_store_instance()
    return HealthResponse(status="ready")
