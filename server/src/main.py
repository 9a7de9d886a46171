"""
Main server entrypoint.
Initializes the FastAPI application and includes the API routers.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from server.src.api import players
from server.src.core.config import settings
from server.src.core.database import create_tables
from server.src.core.exceptions import RosterError
from server.src.core.logging_config import setup_logging, get_logger
from server.src.core.metrics import (
    init_metrics,
    get_metrics,
    get_metrics_content_type,
    metrics,
)

# Initialize logging and metrics as early as possible
setup_logging()
init_metrics()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Roster Server starting up", extra={"version": "0.1.0"})

    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()

    yield
    # Shutdown
    logger.info("Roster Server shutting down")


app_description = """
Player roster service for an online game.

## Features
- **Players**: create, read, partially update and delete player records.
- **Listing**: filter by name/title substring, race, profession, birthday
  range, ban flag, experience and level ranges; sort and page the result.
- **Derived fields**: `level` and `untilNextLevel` are always computed from
  `experience` and cannot be set by clients.
"""

app = FastAPI(
    title="Roster Server", description=app_description, version="0.1.0", lifespan=lifespan
)


@app.middleware("http")
async def track_requests(request: Request, call_next):
    """Record request count and latency per route template."""
    start_time = time.time()
    response = await call_next(request)
    route = request.scope.get("route")
    endpoint = getattr(route, "path", "unmatched")
    metrics.track_http_request(
        request.method, endpoint, response.status_code, time.time() - start_time
    )
    return response


@app.exception_handler(RosterError)
async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
    logger.warning(
        "Request rejected",
        extra={
            "path": request.url.path,
            "error": type(exc).__name__,
            "details": exc.details,
        },
    )
    metrics.track_error("api", type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def malformed_request_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed parameters or bodies are reported as 400, like invalid fields."""
    errors = exc.errors() if hasattr(exc, "errors") else []
    logger.warning(
        "Malformed request",
        extra={"path": request.url.path, "errors": str(errors)},
    )
    metrics.track_error("api", "MalformedRequest")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Bad request", "errors": jsonable_errors(errors)},
    )


def jsonable_errors(errors) -> list:
    """Reduce validation errors to their location and message."""
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in errors
    ]


@app.get("/metrics", summary="Prometheus metrics endpoint", tags=["Monitoring"])
def get_metrics_endpoint():
    """
    Prometheus metrics endpoint.
    Returns server metrics in Prometheus format for monitoring and alerting.
    """
    logger.debug("Metrics endpoint accessed")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())


@app.get("/", summary="Health check endpoint", tags=["Status"])
def read_root():
    """Root endpoint for health checks."""
    logger.debug("Health check endpoint accessed")
    return {"status": "ok"}


@app.get("/version", summary="Get server version", tags=["Status"])
def read_version():
    """Returns the current version of the server application."""
    logger.debug("Version endpoint accessed")
    return {"version": "0.1.0"}


# Include API routers
app.include_router(players.router, prefix="/rest", tags=["Players"])
