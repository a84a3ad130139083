# 📄 File: app/modules/care_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "information retrievers" for plant care: a user's reminder list and a plant's current health grade
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers deriving read models from stored state with the pure care services; no writes, no events
#
# 🔗 Dependencies:
# - app.modules.care_management.application.queries (query definitions)
# - app.modules.care_management.domain.services (reminder scheduler, health evaluator)
# - app.modules.care_management.domain.repositories (repository interfaces)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.api.v1.care (API endpoints invoke handlers)
# - app.background_jobs.tasks.care_reminders (reminder evaluation)

"""
Care Management Query Handlers

Query Handlers:
- ListRemindersQueryHandler: Ordered overdue / due / upcoming reminders for a user
- GetPlantHealthQueryHandler: Health evaluation for one plant

Both are pure reads: calling twice with the same inputs yields the same
result and never advances stored state.
"""

import logging
from typing import Optional

from app.modules.care_management.application.dto.care_dto import (
    DueStateDTO,
    PlantHealthDTO,
    ReminderListDTO,
)
from app.modules.care_management.application.queries.get_plant_health import GetPlantHealthQuery
from app.modules.care_management.application.queries.list_reminders import ListRemindersQuery
from app.modules.care_management.domain.models.due_state import ReminderWindow
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.care_management.domain.services.care_log_processor import next_due_dates
from app.modules.care_management.domain.services.health_evaluator import evaluate_health
from app.modules.care_management.domain.services.reminder_scheduler import ReminderScheduler
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import UnknownEntityError
from app.shared.utils.clock import Clock, SystemClock, ensure_aware, resolve_timezone

logger = logging.getLogger(__name__)


class ListRemindersQueryHandler:
    """Handler for a user's reminder list."""

    def __init__(
        self,
        plant_repository: PlantInstanceRepository,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self._plant_repository = plant_repository
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()

    async def handle(self, query: ListRemindersQuery) -> ReminderListDTO:
        timezone_name = query.timezone or self._settings.DEFAULT_TIMEZONE
        tz = resolve_timezone(timezone_name)
        now = ensure_aware(query.now) if query.now else self._clock.now()

        plants = await self._plant_repository.list_for_user(query.user_id)
        scheduler = ReminderScheduler(ReminderWindow.from_settings(self._settings))

        reminders = [
            DueStateDTO.from_domain(state)
            for state in scheduler.iter_reminders(plants, now, tz)
            if query.statuses is None or state.status in query.statuses
        ]

        logger.debug(f"Listed {len(reminders)} reminders for user {query.user_id} across {len(plants)} plants")
        return ReminderListDTO(
            user_id=query.user_id,
            timezone=timezone_name,
            evaluated_at=now,
            reminders=reminders,
        )


class GetPlantHealthQueryHandler:
    """Handler evaluating one plant's health from its state and history."""

    def __init__(
        self,
        plant_repository: PlantInstanceRepository,
        care_log_repository: CareLogRepository,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self._plant_repository = plant_repository
        self._care_log_repository = care_log_repository
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()

    async def handle(self, query: GetPlantHealthQuery) -> PlantHealthDTO:
        tz = resolve_timezone(query.timezone, default=self._settings.DEFAULT_TIMEZONE)
        now = ensure_aware(query.now) if query.now else self._clock.now()

        instance = await self._plant_repository.get_by_id(query.plant_instance_id)
        if instance is None:
            raise UnknownEntityError("plant_instance", query.plant_instance_id)

        history = await self._care_log_repository.list_for_plant(instance.id)
        health = evaluate_health(
            instance,
            history,
            now,
            tz,
            ReminderWindow.from_settings(self._settings),
            self._settings.health_problem_window,
        )

        return PlantHealthDTO(
            plant_instance_id=instance.id,
            health_status=health,
            previous_status=instance.health_status,
            next_due=next_due_dates(instance, now, tz),
            evaluated_at=now,
        )
