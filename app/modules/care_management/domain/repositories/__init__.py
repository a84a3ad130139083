# 📄 File: app/modules/care_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the storage contracts for plants, care diaries and the species catalog
# 🧪 Purpose (Technical Summary):
# Package initialization for care management repository interfaces (dependency inversion for the persistence collaborator)
# 🔗 Dependencies:
# Repository interface classes, domain models
# 🔄 Connected Modules / Calls From:
# Application handlers, infrastructure implementations

from .plant_instance_repository import PlantInstanceRepository
from .care_log_repository import CareLogRepository
from .plant_catalog_repository import PlantCatalogRepository

__all__ = [
    "PlantInstanceRepository",
    "CareLogRepository",
    "PlantCatalogRepository",
]
