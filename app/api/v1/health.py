# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the plant care service is up and ready to answer requests
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints for load balancers and orchestrators; readiness verifies settings and timezone data load
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.utils.clock, app.shared.events
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import InvalidConfigError
from app.shared.events.publisher import get_event_publisher
from app.shared.utils.clock import resolve_timezone

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                  summary="Basic Health Check",
                  description="Basic health check endpoint for load balancers and monitoring",
                  tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "plant-care-api",
            "version": get_settings().APP_VERSION,
            "uptime_seconds": (datetime.now(timezone.utc) - _app_start_time).total_seconds(),
        }
    )


@health_router.get("/health/live",
                  summary="Liveness Probe",
                  description="Kubernetes liveness probe endpoint",
                  tags=["Health Check"])
async def liveness_probe() -> Response:
    """Returns 200 if the application is alive and running."""
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Kubernetes readiness probe endpoint",
                  tags=["Health Check"])
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe

    The scheduler needs its configured default timezone to resolve; without
    timezone data every reminder computation would fail.
    """
    checks = _run_readiness_checks()
    ready = all(check["status"] == "ok" for check in checks.values())

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "checks": checks,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


def _run_readiness_checks() -> Dict[str, Any]:
    settings = get_settings()
    checks: Dict[str, Any] = {}

    try:
        resolve_timezone(settings.DEFAULT_TIMEZONE)
        checks["timezone_data"] = {"status": "ok", "default_timezone": settings.DEFAULT_TIMEZONE}
    except InvalidConfigError as e:
        logger.error(f"Readiness check failed: {e.message}")
        checks["timezone_data"] = {"status": "error", "error": e.message}

    checks["event_publisher"] = {"status": "ok", **get_event_publisher().get_publisher_metrics()}
    return checks
