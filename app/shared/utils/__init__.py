# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the app
# can use for common tasks like logging and knowing what time it is for a user.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging and clock / timezone helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - clock: Clock abstraction and timezone resolution

# 🔄 Connected Modules / Calls From:
# Used by: All application modules for logging and time handling

from .clock import Clock, FixedClock, SystemClock, Timestamp, ensure_aware, resolve_timezone
from .logging import get_logger, log_context, setup_logging

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "Timestamp",
    "ensure_aware",
    "resolve_timezone",
    "get_logger",
    "log_context",
    "setup_logging",
]
