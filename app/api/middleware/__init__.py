# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the checkpoints every API request passes through
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware
# 🔗 Dependencies:
# logging.py
# 🔄 Connected Modules / Calls From:
# app.main.py

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
