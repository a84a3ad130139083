# 📄 File: app/modules/care_management/domain/repositories/care_log_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how a plant's care diary is stored: entries are only ever added, never edited or erased
# 🧪 Purpose (Technical Summary):
# Append-only repository interface for CareLogEntry history per plant instance
# 🔗 Dependencies:
# Domain models (CareLogEntry), typing, abc
# 🔄 Connected Modules / Calls From:
# Log care activity / plant health handlers, infrastructure implementations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.care_log import CareLogEntry


class CareLogRepository(ABC):
    """
    Append-only store of care log entries.

    History is immutable once recorded; there are no update or delete operations.
    """

    @abstractmethod
    async def append(self, entry: CareLogEntry) -> CareLogEntry:
        """
        Append an entry to its plant instance's history.

        Appending an id that is already stored for the same plant returns the
        stored entry unchanged; an id stored for another plant raises
        ValidationError (DUPLICATE_ENTRY_ID).
        """
        pass

    @abstractmethod
    async def list_for_plant(self, plant_instance_id: str) -> List[CareLogEntry]:
        """History for one plant instance in append order."""
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: str) -> Optional[CareLogEntry]:
        pass
