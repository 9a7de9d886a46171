"""
Prometheus metrics configuration for the roster server.

Counts HTTP traffic, player lifecycle operations and database work so the
service can be monitored from the /metrics endpoint.
"""

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

from server.src.core.config import settings
from server.src.core.logging_config import get_logger

logger = get_logger(__name__)

# Create a custom registry for our metrics
REGISTRY = CollectorRegistry()

# =============================================================================
# APPLICATION INFO METRICS
# =============================================================================

app_info = Info(
    "roster_server_info", "Roster server application information", registry=REGISTRY
)

# =============================================================================
# HTTP/API METRICS
# =============================================================================

http_requests_total = Counter(
    "roster_http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=REGISTRY,
)

http_request_duration_seconds = Histogram(
    "roster_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    registry=REGISTRY,
)

# =============================================================================
# PLAYER METRICS
# =============================================================================

player_operations_total = Counter(
    "roster_player_operations_total",
    "Total number of player operations",
    ["operation", "status"],
    registry=REGISTRY,
)

# =============================================================================
# DATABASE METRICS
# =============================================================================

database_operations_total = Counter(
    "roster_database_operations_total",
    "Total number of database operations",
    ["operation", "table"],
    registry=REGISTRY,
)

database_operation_duration_seconds = Histogram(
    "roster_database_operation_duration_seconds",
    "Database operation duration in seconds",
    ["operation", "table"],
    registry=REGISTRY,
)

# =============================================================================
# ERROR METRICS
# =============================================================================

errors_total = Counter(
    "roster_errors_total",
    "Total number of errors",
    ["component", "error_type"],
    registry=REGISTRY,
)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def init_metrics():
    """Initialize metrics with application information."""
    app_info.info(
        {
            "version": "0.1.0",
            "service": "roster-server",
            "environment": settings.ENVIRONMENT,
        }
    )
    logger.info("Prometheus metrics initialized")


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST


# =============================================================================
# HELPER FUNCTIONS FOR MANUAL METRICS
# =============================================================================


class MetricsHelper:
    """Helper class for manual metrics tracking."""

    @staticmethod
    def track_http_request(method: str, endpoint: str, status_code: int, duration: float):
        """Track a finished HTTP request."""
        http_requests_total.labels(
            method=method, endpoint=endpoint, status_code=str(status_code)
        ).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
            duration
        )

    @staticmethod
    def track_player_operation(operation: str, status: str):
        """Track player lifecycle operations (create, get, update, delete, list, count)."""
        player_operations_total.labels(operation=operation, status=status).inc()

    @staticmethod
    def track_database_operation(operation: str, table: str, duration: float):
        """Track database operations."""
        database_operations_total.labels(operation=operation, table=table).inc()
        database_operation_duration_seconds.labels(
            operation=operation, table=table
        ).observe(duration)

    @staticmethod
    def track_error(component: str, error_type: str):
        """Track application errors."""
        errors_total.labels(component=component, error_type=error_type).inc()


# Global metrics helper instance
metrics = MetricsHelper()
