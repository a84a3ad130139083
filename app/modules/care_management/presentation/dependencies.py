# 📄 File: app/modules/care_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each plant care endpoint the storage, clock and processors it needs, so endpoints stay small and tests can swap pieces out
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for care management repositories, clock, settings and CQRS handlers
# 🔗 Dependencies:
# FastAPI Depends, app.modules.care_management.application.handlers, infrastructure.memory, app.shared
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.api.v1.care, tests (dependency_overrides)

"""
Care Management Module Dependencies

Repositories are process-wide singletons (in-memory implementations);
override them through ``app.dependency_overrides`` to plug in another store.
The catalog is seeded from ``PLANT_CATALOG_FILE`` on first use.
"""

from functools import lru_cache

from fastapi import Depends

from app.modules.care_management.application.handlers.command_handlers import (
    LogCareActivityCommandHandler,
    RegisterPlantCommandHandler,
)
from app.modules.care_management.application.handlers.query_handlers import (
    GetPlantHealthQueryHandler,
    ListRemindersQueryHandler,
)
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.plant_catalog_repository import PlantCatalogRepository
from app.modules.care_management.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.care_management.infrastructure.memory.catalog_loader import load_catalog_entries
from app.modules.care_management.infrastructure.memory.repositories import (
    InMemoryCareLogRepository,
    InMemoryPlantCatalogRepository,
    InMemoryPlantInstanceRepository,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.events.publisher import EventPublisher, get_event_publisher
from app.shared.utils.clock import Clock, SystemClock


@lru_cache()
def get_plant_repository() -> PlantInstanceRepository:
    return InMemoryPlantInstanceRepository()


@lru_cache()
def get_care_log_repository() -> CareLogRepository:
    return InMemoryCareLogRepository()


@lru_cache()
def get_catalog_repository() -> PlantCatalogRepository:
    catalog_file = get_settings().PLANT_CATALOG_FILE
    entries = load_catalog_entries(catalog_file) if catalog_file else ()
    return InMemoryPlantCatalogRepository(entries)


def get_clock() -> Clock:
    return SystemClock()


def get_register_plant_handler(
    plant_repository: PlantInstanceRepository = Depends(get_plant_repository),
    catalog_repository: PlantCatalogRepository = Depends(get_catalog_repository),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> RegisterPlantCommandHandler:
    return RegisterPlantCommandHandler(plant_repository, catalog_repository, clock=clock, settings=settings)


def get_log_care_activity_handler(
    plant_repository: PlantInstanceRepository = Depends(get_plant_repository),
    care_log_repository: CareLogRepository = Depends(get_care_log_repository),
    event_publisher: EventPublisher = Depends(get_event_publisher),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> LogCareActivityCommandHandler:
    return LogCareActivityCommandHandler(
        plant_repository,
        care_log_repository,
        event_publisher=event_publisher,
        clock=clock,
        settings=settings,
    )


def get_list_reminders_handler(
    plant_repository: PlantInstanceRepository = Depends(get_plant_repository),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> ListRemindersQueryHandler:
    return ListRemindersQueryHandler(plant_repository, clock=clock, settings=settings)


def get_plant_health_handler(
    plant_repository: PlantInstanceRepository = Depends(get_plant_repository),
    care_log_repository: CareLogRepository = Depends(get_care_log_repository),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> GetPlantHealthQueryHandler:
    return GetPlantHealthQueryHandler(plant_repository, care_log_repository, clock=clock, settings=settings)
