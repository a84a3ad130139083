# 📄 File: app/modules/care_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action processors" for plant care: registering a new plant, recording a care activity, and re-grading plant health as time passes
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers loading state through repository interfaces, calling the pure care services,
# persisting processor-owned fields under a per-instance lock and publishing domain events.
#
# 🔗 Dependencies:
# - app.modules.care_management.application.commands (command definitions)
# - app.modules.care_management.domain.services (pure care logic)
# - app.modules.care_management.domain.repositories (repository interfaces)
# - app.shared.events.publisher (domain event publishing)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.api.v1.care (API endpoints invoke handlers)
# - app.background_jobs.tasks.care_reminders (health refresh)

__all__ = [
    "LogCareActivityCommandHandler",
    "RegisterPlantCommandHandler",
    "RefreshPlantHealthCommandHandler",
]

# --- Standard library ---
from typing import List, Optional

# --- Application commands ---
from app.modules.care_management.application.commands.log_care_activity import LogCareActivityCommand
from app.modules.care_management.application.commands.register_plant import RegisterPlantCommand
from app.modules.care_management.application.commands.refresh_plant_health import RefreshPlantHealthCommand
from app.modules.care_management.application.dto.care_dto import (
    CareLogResultDTO,
    PlantHealthDTO,
    PlantInstanceDTO,
)

# --- Domain ---
from app.modules.care_management.domain.events.care_events import CareActivityLogged, PlantHealthChanged
from app.modules.care_management.domain.models.due_state import ReminderWindow
from app.modules.care_management.domain.models.plant_instance import PlantInstance
from app.modules.care_management.domain.repositories.care_log_repository import CareLogRepository
from app.modules.care_management.domain.repositories.plant_catalog_repository import PlantCatalogRepository
from app.modules.care_management.domain.repositories.plant_instance_repository import PlantInstanceRepository
from app.modules.care_management.domain.services.care_log_processor import apply_care_log, next_due_dates
from app.modules.care_management.domain.services.health_evaluator import evaluate_health

# --- Shared ---
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import InvalidTimestampError, UnknownEntityError, ValidationError
from app.shared.events.publisher import EventPublisher, get_event_publisher
from app.shared.utils.clock import Clock, SystemClock, ensure_aware, resolve_timezone
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class LogCareActivityCommandHandler:
    """
    Handles care log submission: validation, monotonic last-done update,
    append-only history, health recomputation and event publishing.
    """

    def __init__(
        self,
        plant_repository: PlantInstanceRepository,
        care_log_repository: CareLogRepository,
        event_publisher: Optional[EventPublisher] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self._plant_repository = plant_repository
        self._care_log_repository = care_log_repository
        self._event_publisher = event_publisher or get_event_publisher()
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()

    async def handle(self, command: LogCareActivityCommand) -> CareLogResultDTO:
        now = self._clock.now()
        tz = resolve_timezone(command.timezone, default=self._settings.DEFAULT_TIMEZONE)
        entry = command.to_entry()

        async with self._plant_repository.locked(command.plant_instance_id):
            instance = await self._plant_repository.get_by_id(command.plant_instance_id)
            if instance is None:
                logger.warning(
                    "Care log rejected: unknown plant instance",
                    plant_instance_id=command.plant_instance_id,
                )
                raise UnknownEntityError("plant_instance", command.plant_instance_id)

            stored = await self._care_log_repository.get_by_id(entry.id)
            if stored is not None and stored.plant_instance_id != instance.id:
                logger.warning(
                    "Care log rejected: id belongs to another plant",
                    care_log_id=entry.id,
                    plant_instance_id=instance.id,
                )
                raise ValidationError(
                    f"Care log id {entry.id} already belongs to another plant",
                    field="entry_id",
                    value=entry.id,
                    error_code="DUPLICATE_ENTRY_ID",
                )

            history = await self._care_log_repository.list_for_plant(instance.id)

            try:
                result = apply_care_log(
                    instance,
                    entry,
                    history,
                    now=now,
                    tz=tz,
                    window=ReminderWindow.from_settings(self._settings),
                    default_problem_window=self._settings.health_problem_window,
                )
            except InvalidTimestampError as e:
                logger.warning(
                    f"Care log rejected: {e.message}",
                    plant_instance_id=instance.id,
                    activity_type=entry.activity_type.value,
                    performed_at=entry.performed_at.isoformat(),
                )
                raise

            if result.applied:
                await self._care_log_repository.append(result.entry)
                await self._plant_repository.save(result.instance)

        if not result.applied:
            logger.info("Duplicate care log ignored", care_log_id=entry.id, plant_instance_id=instance.id)
            return CareLogResultDTO.from_domain(result)

        logger.log_business_event(
            "care_activity_logged",
            f"Logged {entry.activity_type.value} for plant {instance.id}",
            entity_id=result.entry.id,
            entity_type="care_log",
            extra={"plant_instance_id": instance.id, "health_status": result.instance.health_status.value},
        )

        await self._event_publisher.publish(CareActivityLogged(instance.user_id, result.entry))
        if result.health_changed:
            await self._event_publisher.publish(PlantHealthChanged(
                plant_id=instance.id,
                user_id=instance.user_id,
                previous_status=result.previous_health,
                new_status=result.instance.health_status,
            ))

        return CareLogResultDTO.from_domain(result)


class RegisterPlantCommandHandler:
    """
    Handles plant registration: catalog lookup, reminder seeding and the
    initial health evaluation.
    """

    def __init__(
        self,
        plant_repository: PlantInstanceRepository,
        catalog_repository: PlantCatalogRepository,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self._plant_repository = plant_repository
        self._catalog_repository = catalog_repository
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()

    async def handle(self, command: RegisterPlantCommand) -> PlantInstanceDTO:
        now = self._clock.now()

        catalog_entry = await self._catalog_repository.get_by_id(command.catalog_entry_id)
        if catalog_entry is None:
            raise UnknownEntityError("catalog_entry", command.catalog_entry_id)

        acquired_at = ensure_aware(command.acquired_at)
        if acquired_at > now:
            raise InvalidTimestampError(
                message="Plant acquisition date cannot be in the future",
                performed_at=acquired_at.isoformat(),
                reason="future",
            )

        instance = PlantInstance.create_from_catalog(
            user_id=command.user_id,
            catalog_entry=catalog_entry,
            acquired_at=acquired_at,
            nickname=command.nickname,
            location=command.location,
            notes=command.notes,
            watering_reminder=command.watering_reminder,
            fertilizing_reminder=command.fertilizing_reminder,
            default_reminder_time=command.default_reminder_time or self._settings.DEFAULT_REMINDER_TIME,
            notification_method=command.notification_method,
        )

        health = evaluate_health(
            instance,
            (),
            now,
            tz=self._settings.DEFAULT_TIMEZONE,
            window=ReminderWindow.from_settings(self._settings),
            default_problem_window=self._settings.health_problem_window,
        )
        instance = instance.model_copy(update={"health_status": health})
        await self._plant_repository.add(instance)

        logger.log_business_event(
            "plant_registered",
            f"Registered plant {instance.id} ({catalog_entry.name})",
            entity_id=instance.id,
            entity_type="plant_instance",
            extra={"user_id": instance.user_id, "catalog_entry_id": catalog_entry.id},
        )
        return PlantInstanceDTO.from_domain(instance)


class RefreshPlantHealthCommandHandler:
    """
    Recomputes stored health for all of a user's plants at the current
    instant. Health can change with time alone (a reminder slipping past its
    grace period), so this runs from the background reminder job.
    """

    def __init__(
        self,
        plant_repository: PlantInstanceRepository,
        care_log_repository: CareLogRepository,
        event_publisher: Optional[EventPublisher] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self._plant_repository = plant_repository
        self._care_log_repository = care_log_repository
        self._event_publisher = event_publisher or get_event_publisher()
        self._clock = clock or SystemClock()
        self._settings = settings or get_settings()

    async def handle(self, command: RefreshPlantHealthCommand) -> List[PlantHealthDTO]:
        now = ensure_aware(command.now) if command.now else self._clock.now()
        tz = resolve_timezone(command.timezone, default=self._settings.DEFAULT_TIMEZONE)
        window = ReminderWindow.from_settings(self._settings)

        results: List[PlantHealthDTO] = []
        for plant in await self._plant_repository.list_for_user(command.user_id):
            async with self._plant_repository.locked(plant.id):
                instance = await self._plant_repository.get_by_id(plant.id)
                if instance is None:
                    continue  # removed meanwhile

                history = await self._care_log_repository.list_for_plant(instance.id)
                health = evaluate_health(
                    instance, history, now, tz, window, self._settings.health_problem_window
                )
                if health != instance.health_status:
                    await self._plant_repository.save(
                        instance.model_copy(update={"health_status": health, "updated_at": now})
                    )

            results.append(PlantHealthDTO(
                plant_instance_id=instance.id,
                health_status=health,
                previous_status=instance.health_status,
                next_due=next_due_dates(instance, now, tz),
                evaluated_at=now,
            ))

            if health != instance.health_status:
                await self._event_publisher.publish(PlantHealthChanged(
                    plant_id=instance.id,
                    user_id=instance.user_id,
                    previous_status=instance.health_status,
                    new_status=health,
                ))

        changed = sum(1 for result in results if result.changed)
        logger.info(
            f"Refreshed health for {len(results)} plants",
            user_id=command.user_id,
            changed=changed,
        )
        return results
