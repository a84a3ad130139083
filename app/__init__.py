# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our Plant Care application code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the Plant Care FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
Plant Care Application - Care Reminders and Plant Health

Backend for tracking a user's plants: when each one is next due for
watering or fertilizing, how logged care activities move those dates,
and what the care history says about the plant's health.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Backend API"
__description__ = "Plant care tracking with care reminders and health status"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
