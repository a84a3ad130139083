# 📄 File: app/modules/care_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes how plant care is exposed over the web
# 🧪 Purpose (Technical Summary):
# Presentation layer (FastAPI endpoints, schemas, dependencies) for care management
# 🔗 Dependencies:
# FastAPI, application layer
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main
