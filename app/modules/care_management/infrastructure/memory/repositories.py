# 📄 File: app/modules/care_management/infrastructure/memory/repositories.py
# 🧭 Purpose (Layman Explanation):
# Simple in-memory storage for plants, care diaries and the species catalog
# 🧪 Purpose (Technical Summary):
# In-process implementations of the care management repository interfaces with per-instance asyncio locks
# 🔗 Dependencies:
# asyncio, contextlib, domain repository interfaces and models
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.dependencies, app.background_jobs, tests

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Iterable, List, Optional

from app.modules.care_management.domain.models.care_log import CareLogEntry
from app.modules.care_management.domain.models.plant_catalog import PlantCatalogEntry
from app.modules.care_management.domain.models.plant_instance import PlantInstance
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.plant_catalog_repository import PlantCatalogRepository
from app.modules.care_management.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.shared.core.exceptions import UnknownEntityError, ValidationError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class InMemoryPlantInstanceRepository(PlantInstanceRepository):
    """Plant instances keyed by id."""

    def __init__(self, instances: Iterable[PlantInstance] = ()):
        self._instances: Dict[str, PlantInstance] = {instance.id: instance for instance in instances}
        self._locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def add(self, instance: PlantInstance) -> PlantInstance:
        if instance.id in self._instances:
            raise ValueError(f"Plant instance {instance.id} already exists")
        self._instances[instance.id] = instance
        logger.debug("Stored plant instance", plant_instance_id=instance.id)
        return instance

    async def get_by_id(self, instance_id: str) -> Optional[PlantInstance]:
        return self._instances.get(instance_id)

    async def list_for_user(self, user_id: str) -> List[PlantInstance]:
        return sorted(
            (instance for instance in self._instances.values() if instance.user_id == user_id),
            key=lambda instance: instance.id,
        )

    async def list_user_ids(self) -> List[str]:
        return sorted({instance.user_id for instance in self._instances.values()})

    async def save(self, instance: PlantInstance) -> PlantInstance:
        if instance.id not in self._instances:
            raise UnknownEntityError("plant_instance", instance.id)
        self._instances[instance.id] = instance
        return instance

    @asynccontextmanager
    async def locked(self, instance_id: str) -> AsyncIterator[None]:
        async with self._locks[instance_id]:
            yield

    async def remove(self, instance_id: str) -> bool:
        self._locks.pop(instance_id, None)
        return self._instances.pop(instance_id, None) is not None


class InMemoryCareLogRepository(CareLogRepository):
    """Append-only care log history per plant instance."""

    def __init__(self):
        self._entries: Dict[str, CareLogEntry] = {}
        self._by_plant: Dict[str, List[str]] = defaultdict(list)

    async def append(self, entry: CareLogEntry) -> CareLogEntry:
        stored = self._entries.get(entry.id)
        if stored is not None:
            if stored.plant_instance_id != entry.plant_instance_id:
                raise ValidationError(
                    f"Care log id {entry.id} already belongs to another plant",
                    field="entry_id",
                    value=entry.id,
                    error_code="DUPLICATE_ENTRY_ID",
                )
            return stored
        self._entries[entry.id] = entry
        self._by_plant[entry.plant_instance_id].append(entry.id)
        return entry

    async def list_for_plant(self, plant_instance_id: str) -> List[CareLogEntry]:
        return [self._entries[entry_id] for entry_id in self._by_plant.get(plant_instance_id, [])]

    async def get_by_id(self, entry_id: str) -> Optional[CareLogEntry]:
        return self._entries.get(entry_id)


class InMemoryPlantCatalogRepository(PlantCatalogRepository):
    """Read-only catalog seeded at construction."""

    def __init__(self, entries: Iterable[PlantCatalogEntry] = ()):
        self._entries: Dict[str, PlantCatalogEntry] = {entry.id: entry for entry in entries}

    async def get_by_id(self, entry_id: str) -> Optional[PlantCatalogEntry]:
        return self._entries.get(entry_id)

    async def list_all(self) -> List[PlantCatalogEntry]:
        return sorted(self._entries.values(), key=lambda entry: entry.name)
