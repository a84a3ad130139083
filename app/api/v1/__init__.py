# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API, so new versions can be added later without breaking existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with version metadata, route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Plant Care Application API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers (care management) are mounted by router.py.
"""

__version__ = "1.0.0"
__api_version__ = "v1"

# API v1 configuration
API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": "stable",
    "description": "Plant Care Application API Version 1",
    "features": [
        "care_scheduling",
        "care_logging",
        "plant_health",
    ],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "care": "/care",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Care",
        "description": "Plant registration, care logging, reminders and health"
    },
    {
        "name": "Health Check",
        "description": "System health and status monitoring"
    },
    {
        "name": "API Info",
        "description": "API version information"
    }
]
