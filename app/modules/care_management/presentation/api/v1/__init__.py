# 📄 File: app/modules/care_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the plant care web endpoints
# 🧪 Purpose (Technical Summary):
# API version 1 package for care management endpoints
# 🔗 Dependencies:
# care.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .care import care_router

__all__ = ["care_router"]
