# 📄 File: app/modules/care_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant care API endpoints by version
# 🧪 Purpose (Technical Summary):
# API package initialization for care management
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
