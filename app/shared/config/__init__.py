# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell our Plant Care app how to behave, like which
# timezone to use by default and how early to show upcoming care reminders.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the cached settings factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
