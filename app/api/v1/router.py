# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending health checks
# and plant care requests to the right handlers.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines module routers, configures route prefixes,
# and provides centralized routing management for the FastAPI application.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.care_management.presentation.api.v1.care
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from . import API_V1_CONFIG, ROUTE_PREFIXES
from .health import health_router
from app.modules.care_management.presentation.api.v1.care import care_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)

# Care Management
api_v1_router.include_router(
    care_router,
    prefix=ROUTE_PREFIXES["care"],
    tags=["Care"]
)


@api_v1_router.get("/",
                  summary="API v1 Information",
                  description="Get API v1 version information and available endpoints",
                  tags=["API Info"])
async def api_v1_info() -> dict:
    """API v1 version details, route prefixes and documentation links"""
    return {
        **API_V1_CONFIG,
        "routes": ROUTE_PREFIXES,
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc"
        }
    }
