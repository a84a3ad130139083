# 📄 File: app/modules/care_management/domain/repositories/plant_instance_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the app saves and finds a user's plants without caring which database keeps them
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantInstance aggregates; writes are limited to whole-instance saves produced by the domain services
# 🔗 Dependencies:
# Domain models (PlantInstance), typing, abc
# 🔄 Connected Modules / Calls From:
# Command/query handlers, background reminder job, infrastructure implementations

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from ..models.plant_instance import PlantInstance


class PlantInstanceRepository(ABC):
    """
    Repository interface for PlantInstance data access.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Writes for the same plant instance must be serialized by the implementation
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def add(self, instance: PlantInstance) -> PlantInstance:
        """
        Store a newly registered plant instance.

        Raises:
            ValueError: If an instance with the same id already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, instance_id: str) -> Optional[PlantInstance]:
        """
        Get plant instance by ID.

        Returns:
            PlantInstance if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[PlantInstance]:
        """List a user's plant instances, ordered by id."""
        pass

    @abstractmethod
    async def list_user_ids(self) -> List[str]:
        """Distinct owners with at least one plant, sorted."""
        pass

    @abstractmethod
    async def save(self, instance: PlantInstance) -> PlantInstance:
        """
        Replace the stored state of an existing plant instance.

        Raises:
            UnknownEntityError: If the instance is not stored
        """
        pass

    @abstractmethod
    def locked(self, instance_id: str) -> AsyncContextManager[None]:
        """
        Serialize read-modify-write cycles for one plant instance.

        Usage:
            async with repository.locked(instance_id):
                instance = await repository.get_by_id(instance_id)
                ...
                await repository.save(updated)
        """
        pass

    @abstractmethod
    async def remove(self, instance_id: str) -> bool:
        """Remove a plant instance. Returns False if it was not stored."""
        pass
