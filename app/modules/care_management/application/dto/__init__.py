# 📄 File: app/modules/care_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the standard data packages the care module hands to the API and background jobs
# 🧪 Purpose (Technical Summary):
# Package initialization for care management DTOs
# 🔗 Dependencies:
# care_dto.py
# 🔄 Connected Modules / Calls From:
# Handlers, API endpoints, background jobs

from .care_dto import (
    CareLogResultDTO,
    DueStateDTO,
    PlantHealthDTO,
    PlantInstanceDTO,
    ReminderListDTO,
)

__all__ = [
    "CareLogResultDTO",
    "DueStateDTO",
    "PlantHealthDTO",
    "PlantInstanceDTO",
    "ReminderListDTO",
]
