# 📄 File: app/modules/care_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the read-only questions about plant care: reminders and health
# 🧪 Purpose (Technical Summary):
# Package initialization for care management CQRS queries
# 🔗 Dependencies:
# Query modules
# 🔄 Connected Modules / Calls From:
# Query handlers, API endpoints, background jobs

from .get_plant_health import GetPlantHealthQuery
from .list_reminders import ListRemindersQuery

__all__ = [
    "GetPlantHealthQuery",
    "ListRemindersQuery",
]
