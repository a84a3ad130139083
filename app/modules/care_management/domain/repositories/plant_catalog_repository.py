# 📄 File: app/modules/care_management/domain/repositories/plant_catalog_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the app looks up plant species in the catalog (read-only; the catalog is curated elsewhere)
# 🧪 Purpose (Technical Summary):
# Read-only repository interface for PlantCatalogEntry records
# 🔗 Dependencies:
# Domain models (PlantCatalogEntry), typing, abc
# 🔄 Connected Modules / Calls From:
# Register plant handler, infrastructure implementations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant_catalog import PlantCatalogEntry


class PlantCatalogRepository(ABC):
    """Read access to the plant species catalog."""

    @abstractmethod
    async def get_by_id(self, entry_id: str) -> Optional[PlantCatalogEntry]:
        """
        Get catalog entry by ID.

        Returns:
            PlantCatalogEntry if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[PlantCatalogEntry]:
        pass
