# 📄 File: app/modules/care_management/infrastructure/memory/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps plant care data in memory, for running the app without a database and for tests
# 🧪 Purpose (Technical Summary):
# Package initialization for in-process repository implementations
# 🔗 Dependencies:
# repositories.py, catalog_loader.py
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs, tests

from .catalog_loader import load_catalog_entries
from .repositories import (
    InMemoryCareLogRepository,
    InMemoryPlantCatalogRepository,
    InMemoryPlantInstanceRepository,
)

__all__ = [
    "load_catalog_entries",
    "InMemoryCareLogRepository",
    "InMemoryPlantCatalogRepository",
    "InMemoryPlantInstanceRepository",
]
