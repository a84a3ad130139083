# 📄 File: app/modules/care_management/presentation/api/v1/care.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plant care: add a plant, log that you watered or fed it, check how healthy it is, and see which chores are due
#
# 🧪 Purpose (Technical Summary):
# FastAPI care endpoints translating requests into CQRS commands/queries; domain errors propagate to the app-level PlantCareException handler
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Query parameters
# - app.modules.care_management.application (commands, queries, handlers)
# - app.modules.care_management.presentation.api.schemas.care_schemas (request/response schemas)
# - app.modules.care_management.presentation.dependencies (handler injection)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/care)
# - Mobile app and web interface (reminder lists, care logging)

"""
Care API Endpoints

Endpoints:
- POST /plants: Register a newly acquired plant
- POST /plants/{plant_id}/care-logs: Log a care activity
- GET /plants/{plant_id}/health: Evaluate a plant's current health
- GET /users/{user_id}/reminders: List a user's overdue, due and upcoming reminders
- GET /catalog: List plant species available for registration
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.care_management.application.handlers.command_handlers import (
    LogCareActivityCommandHandler,
    RegisterPlantCommandHandler,
)
from app.modules.care_management.application.handlers.query_handlers import (
    GetPlantHealthQueryHandler,
    ListRemindersQueryHandler,
)
from app.modules.care_management.application.queries.get_plant_health import GetPlantHealthQuery
from app.modules.care_management.application.queries.list_reminders import ListRemindersQuery
from app.modules.care_management.domain.models.due_state import DueStatus
from app.modules.care_management.domain.models.plant_catalog import PlantCatalogEntry
from app.modules.care_management.domain.repositories.plant_catalog_repository import PlantCatalogRepository
from app.modules.care_management.presentation.api.schemas.care_schemas import (
    CareLogResponse,
    LogCareActivityRequest,
    PlantHealthResponse,
    PlantResponse,
    RegisterPlantRequest,
    ReminderListResponse,
)
from app.modules.care_management.presentation.dependencies import (
    get_catalog_repository,
    get_list_reminders_handler,
    get_log_care_activity_handler,
    get_plant_health_handler,
    get_register_plant_handler,
)

logger = logging.getLogger(__name__)

care_router = APIRouter()

ERROR_RESPONSES = {
    404: {"description": "Unknown plant instance or catalog entry"},
    422: {"description": "Invalid reminder configuration, timezone or timestamp"},
}


@care_router.post(
    "/plants",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a plant",
    description="Register a newly acquired plant; reminders default to the catalog care frequencies",
    responses=ERROR_RESPONSES,
)
async def register_plant(
    request: RegisterPlantRequest,
    handler: RegisterPlantCommandHandler = Depends(get_register_plant_handler),
) -> PlantResponse:
    plant = await handler.handle(request.to_command())
    return PlantResponse.from_dto(plant)


@care_router.post(
    "/plants/{plant_id}/care-logs",
    response_model=CareLogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log a care activity",
    description="Record a care activity; resubmitting an entry id already logged is a no-op (applied=false)",
    responses=ERROR_RESPONSES,
)
async def log_care_activity(
    plant_id: str,
    request: LogCareActivityRequest,
    handler: LogCareActivityCommandHandler = Depends(get_log_care_activity_handler),
) -> CareLogResponse:
    result = await handler.handle(request.to_command(plant_id))
    return CareLogResponse.from_dto(result)


@care_router.get(
    "/plants/{plant_id}/health",
    response_model=PlantHealthResponse,
    summary="Get plant health",
    responses=ERROR_RESPONSES,
)
async def get_plant_health(
    plant_id: str,
    timezone: Optional[str] = Query(default=None, description="IANA timezone of the owner"),
    handler: GetPlantHealthQueryHandler = Depends(get_plant_health_handler),
) -> PlantHealthResponse:
    health = await handler.handle(GetPlantHealthQuery(plant_instance_id=plant_id, timezone=timezone))
    return PlantHealthResponse.from_dto(health)


@care_router.get(
    "/users/{user_id}/reminders",
    response_model=ReminderListResponse,
    summary="List care reminders",
    description="Overdue reminders first (most overdue first), then due, then upcoming (soonest first)",
    responses=ERROR_RESPONSES,
)
async def list_reminders(
    user_id: str,
    timezone: Optional[str] = Query(default=None, description="IANA timezone of the user"),
    status_filter: Optional[List[DueStatus]] = Query(default=None, alias="status"),
    handler: ListRemindersQueryHandler = Depends(get_list_reminders_handler),
) -> ReminderListResponse:
    reminders = await handler.handle(ListRemindersQuery(user_id=user_id, timezone=timezone, statuses=status_filter))
    logger.debug(f"Returning {len(reminders.reminders)} reminders for user {user_id}")
    return ReminderListResponse.from_dto(reminders)


@care_router.get(
    "/catalog",
    response_model=List[PlantCatalogEntry],
    summary="List plant catalog",
    description="Plant species with their default watering and fertilizing frequencies",
)
async def list_catalog(
    catalog_repository: PlantCatalogRepository = Depends(get_catalog_repository),
) -> List[PlantCatalogEntry]:
    return await catalog_repository.list_all()
