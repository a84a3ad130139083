# 📄 File: app/modules/care_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the processors that carry out plant care requests and questions
# 🧪 Purpose (Technical Summary):
# Package initialization for care management command and query handlers
# 🔗 Dependencies:
# command_handlers.py, query_handlers.py
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs

from .command_handlers import (
    LogCareActivityCommandHandler,
    RefreshPlantHealthCommandHandler,
    RegisterPlantCommandHandler,
)
from .query_handlers import GetPlantHealthQueryHandler, ListRemindersQueryHandler

__all__ = [
    "LogCareActivityCommandHandler",
    "RefreshPlantHealthCommandHandler",
    "RegisterPlantCommandHandler",
    "GetPlantHealthQueryHandler",
    "ListRemindersQueryHandler",
]
