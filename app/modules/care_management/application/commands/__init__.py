# 📄 File: app/modules/care_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the requests that change plant care data: registering a plant and logging care
# 🧪 Purpose (Technical Summary):
# Package initialization for care management CQRS commands
# 🔗 Dependencies:
# Command modules
# 🔄 Connected Modules / Calls From:
# Command handlers, API endpoints

from .log_care_activity import LogCareActivityCommand
from .register_plant import RegisterPlantCommand
from .refresh_plant_health import RefreshPlantHealthCommand

__all__ = [
    "LogCareActivityCommand",
    "RegisterPlantCommand",
    "RefreshPlantHealthCommand",
]
