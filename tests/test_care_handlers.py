"""Tests for care management command and query handlers."""

import asyncio

import pytest

from app.modules.care_management.application.commands.log_care_activity import LogCareActivityCommand
from app.modules.care_management.application.commands.refresh_plant_health import RefreshPlantHealthCommand
from app.modules.care_management.application.commands.register_plant import RegisterPlantCommand
from app.modules.care_management.application.handlers.command_handlers import (
    LogCareActivityCommandHandler,
    RefreshPlantHealthCommandHandler,
    RegisterPlantCommandHandler,
)
from app.modules.care_management.application.handlers.query_handlers import (
    GetPlantHealthQueryHandler,
    ListRemindersQueryHandler,
)
from app.modules.care_management.application.queries.get_plant_health import GetPlantHealthQuery
from app.modules.care_management.application.queries.list_reminders import ListRemindersQuery
from app.modules.care_management.domain.events.care_events import CareActivityLogged, PlantHealthChanged
from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.due_state import DueStatus
from app.modules.care_management.domain.models.plant_instance import HealthStatus
from app.modules.care_management.domain.models.reminder import CareFrequency, NotificationMethod, ReminderConfig
from app.shared.core.exceptions import InvalidConfigError, InvalidTimestampError, UnknownEntityError, ValidationError


@pytest.fixture()
def log_handler(plant_repository, care_log_repository, publisher, clock, settings):
    return LogCareActivityCommandHandler(
        plant_repository, care_log_repository, event_publisher=publisher, clock=clock, settings=settings
    )


@pytest.fixture()
def register_handler(plant_repository, catalog_repository, clock, settings):
    return RegisterPlantCommandHandler(plant_repository, catalog_repository, clock=clock, settings=settings)


class TestRegisterPlant:
    async def test_reminders_seeded_from_catalog(self, register_handler, plant_repository, day):
        dto = await register_handler.handle(RegisterPlantCommand(
            user_id="user-1",
            catalog_entry_id="monstera-deliciosa",
            acquired_at=day(5),
            nickname="Monty",
            default_reminder_time="08:00",
        ))

        assert dto.watering_reminder.frequency == CareFrequency.WEEKLY
        assert dto.watering_reminder.time_of_day == "08:00"
        assert dto.fertilizing_reminder.frequency == CareFrequency.MONTHLY
        assert dto.health_status == HealthStatus.EXCELLENT
        assert (await plant_repository.get_by_id(dto.id)).nickname == "Monty"

    async def test_explicit_reminder_wins(self, register_handler, day):
        dto = await register_handler.handle(RegisterPlantCommand(
            user_id="user-1",
            catalog_entry_id="monstera-deliciosa",
            acquired_at=day(5),
            watering_reminder=ReminderConfig(
                frequency=CareFrequency.EVERY_3_DAYS, notification_method=NotificationMethod.EMAIL
            ),
        ))

        assert dto.watering_reminder.frequency == CareFrequency.EVERY_3_DAYS
        assert dto.watering_reminder.notification_method == NotificationMethod.EMAIL

    async def test_unknown_catalog_entry(self, register_handler, day):
        with pytest.raises(UnknownEntityError) as exc_info:
            await register_handler.handle(RegisterPlantCommand(
                user_id="user-1", catalog_entry_id="triffid", acquired_at=day(1)
            ))
        assert exc_info.value.details["resource_type"] == "catalog_entry"

    async def test_future_acquisition_rejected(self, register_handler, day):
        with pytest.raises(InvalidTimestampError):
            await register_handler.handle(RegisterPlantCommand(
                user_id="user-1", catalog_entry_id="monstera-deliciosa", acquired_at=day(11)
            ))


class TestLogCareActivity:
    async def test_applies_and_persists(self, log_handler, plant_repository, care_log_repository, make_plant, day):
        await plant_repository.add(make_plant(last_watered_at=day(5)))

        dto = await log_handler.handle(LogCareActivityCommand(
            plant_instance_id="plant-1",
            activity_type=CareActivityType.WATERING,
            performed_at=day(10),
            notes="  soil was dry  ",
        ))

        stored = await plant_repository.get_by_id("plant-1")
        history = await care_log_repository.list_for_plant("plant-1")
        assert dto.applied is True
        assert stored.last_watered_at == day(10)
        assert dto.next_due[CareActivityType.WATERING] == day(17)
        assert [entry.notes for entry in history] == ["soil was dry"]
        assert dto.history_size == 1

    async def test_publishes_events(self, log_handler, plant_repository, publisher, make_plant, day):
        await plant_repository.add(make_plant().model_copy(update={"health_status": HealthStatus.GOOD}))

        await log_handler.handle(LogCareActivityCommand(
            plant_instance_id="plant-1", activity_type=CareActivityType.WATERING, performed_at=day(9)
        ))

        logged = publisher.published_events(CareActivityLogged.EVENT_TYPE)
        changed = publisher.published_events(PlantHealthChanged.EVENT_TYPE)
        assert len(logged) == 1 and logged[0].user_id == "user-1"
        assert len(changed) == 1
        assert changed[0].health_status == HealthStatus.EXCELLENT.value
        assert changed[0].data["previous_status"] == HealthStatus.GOOD.value

    async def test_resubmission_is_idempotent(self, log_handler, plant_repository, care_log_repository, publisher, make_plant, day):
        await plant_repository.add(make_plant())
        command = LogCareActivityCommand(
            plant_instance_id="plant-1",
            activity_type=CareActivityType.WATERING,
            performed_at=day(9),
            entry_id="client-log-1",
        )

        first = await log_handler.handle(command)
        second = await log_handler.handle(command)

        assert first.applied is True
        assert second.applied is False
        assert second.care_log_id == "client-log-1"
        assert len(await care_log_repository.list_for_plant("plant-1")) == 1
        assert len(publisher.published_events(CareActivityLogged.EVENT_TYPE)) == 1

    async def test_entry_id_owned_by_another_plant_is_rejected(self, log_handler, plant_repository, care_log_repository, make_plant, day):
        await plant_repository.add(make_plant("plant-a"))
        other = make_plant("plant-b")
        await plant_repository.add(other)
        await log_handler.handle(LogCareActivityCommand(
            plant_instance_id="plant-a", activity_type=CareActivityType.WATERING, performed_at=day(1), entry_id="X"
        ))

        with pytest.raises(ValidationError) as exc_info:
            await log_handler.handle(LogCareActivityCommand(
                plant_instance_id="plant-b", activity_type=CareActivityType.WATERING, performed_at=day(2), entry_id="X"
            ))

        assert exc_info.value.error_code == "DUPLICATE_ENTRY_ID"
        assert exc_info.value.details["field"] == "entry_id"
        assert await plant_repository.get_by_id("plant-b") == other
        assert await care_log_repository.list_for_plant("plant-b") == []
        assert [entry.id for entry in await care_log_repository.list_for_plant("plant-a")] == ["X"]

    async def test_future_entry_leaves_state_unchanged(self, log_handler, plant_repository, care_log_repository, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        await plant_repository.add(plant)

        with pytest.raises(InvalidTimestampError):
            await log_handler.handle(LogCareActivityCommand(
                plant_instance_id="plant-1", activity_type=CareActivityType.WATERING, performed_at=day(12)
            ))

        assert await plant_repository.get_by_id("plant-1") == plant
        assert await care_log_repository.list_for_plant("plant-1") == []

    async def test_unknown_plant(self, log_handler, day):
        with pytest.raises(UnknownEntityError):
            await log_handler.handle(LogCareActivityCommand(
                plant_instance_id="ghost", activity_type=CareActivityType.WATERING, performed_at=day(9)
            ))

    async def test_unknown_timezone(self, log_handler, plant_repository, make_plant, day):
        await plant_repository.add(make_plant())

        with pytest.raises(InvalidConfigError):
            await log_handler.handle(LogCareActivityCommand(
                plant_instance_id="plant-1",
                activity_type=CareActivityType.WATERING,
                performed_at=day(9),
                timezone="Nowhere/Special",
            ))

    async def test_concurrent_logs_keep_the_latest(self, log_handler, plant_repository, care_log_repository, make_plant, day):
        await plant_repository.add(make_plant())
        commands = [
            LogCareActivityCommand(
                plant_instance_id="plant-1", activity_type=CareActivityType.WATERING, performed_at=day(n)
            )
            for n in (3, 9, 6, 1)
        ]

        await asyncio.gather(*(log_handler.handle(command) for command in commands))

        assert (await plant_repository.get_by_id("plant-1")).last_watered_at == day(9)
        assert len(await care_log_repository.list_for_plant("plant-1")) == 4


class TestQueries:
    async def test_list_reminders(self, plant_repository, clock, settings, make_plant, day):
        await plant_repository.add(make_plant("p-1", last_watered_at=day(1)))   # due day 8, overdue
        await plant_repository.add(make_plant("p-2", last_watered_at=day(4)))   # due day 11, upcoming
        await plant_repository.add(make_plant("p-3", user_id="user-2"))
        handler = ListRemindersQueryHandler(plant_repository, clock=clock, settings=settings)

        result = await handler.handle(ListRemindersQuery(user_id="user-1"))

        assert result.timezone == "UTC"
        assert result.evaluated_at == day(10)
        assert [(r.plant_instance_id, r.status) for r in result.reminders] == [
            ("p-1", DueStatus.OVERDUE),
            ("p-2", DueStatus.UPCOMING),
        ]
        assert [r.plant_instance_id for r in result.actionable] == ["p-1"]

    async def test_list_reminders_status_filter_and_time_travel(self, plant_repository, clock, settings, make_plant, day):
        await plant_repository.add(make_plant("p-1"))
        handler = ListRemindersQueryHandler(plant_repository, clock=clock, settings=settings)

        result = await handler.handle(ListRemindersQuery(
            user_id="user-1", now=day(6), statuses=[DueStatus.UPCOMING]
        ))

        assert [r.status for r in result.reminders] == [DueStatus.UPCOMING]

    async def test_plant_health_is_read_only(self, plant_repository, care_log_repository, clock, settings, make_plant, day):
        plant = make_plant().model_copy(update={"health_status": HealthStatus.EXCELLENT})
        await plant_repository.add(plant)
        handler = GetPlantHealthQueryHandler(plant_repository, care_log_repository, clock=clock, settings=settings)

        result = await handler.handle(GetPlantHealthQuery(plant_instance_id="plant-1"))

        assert result.health_status == HealthStatus.GOOD
        assert result.previous_status == HealthStatus.EXCELLENT
        assert result.changed is True
        assert (await plant_repository.get_by_id("plant-1")).health_status == HealthStatus.EXCELLENT

    async def test_plant_health_unknown_plant(self, plant_repository, care_log_repository, clock, settings):
        handler = GetPlantHealthQueryHandler(plant_repository, care_log_repository, clock=clock, settings=settings)

        with pytest.raises(UnknownEntityError):
            await handler.handle(GetPlantHealthQuery(plant_instance_id="ghost"))


class TestRefreshPlantHealth:
    async def test_persists_and_announces_changes(self, plant_repository, care_log_repository, publisher, clock, settings, make_plant, day):
        await plant_repository.add(make_plant("p-1").model_copy(update={"health_status": HealthStatus.EXCELLENT}))
        await plant_repository.add(make_plant("p-2", last_watered_at=day(8)).model_copy(
            update={"health_status": HealthStatus.EXCELLENT}
        ))
        handler = RefreshPlantHealthCommandHandler(
            plant_repository, care_log_repository, event_publisher=publisher, clock=clock, settings=settings
        )

        results = await handler.handle(RefreshPlantHealthCommand(user_id="user-1"))

        assert [(r.plant_instance_id, r.health_status, r.changed) for r in results] == [
            ("p-1", HealthStatus.GOOD, True),
            ("p-2", HealthStatus.EXCELLENT, False),
        ]
        assert (await plant_repository.get_by_id("p-1")).health_status == HealthStatus.GOOD
        assert len(publisher.published_events(PlantHealthChanged.EVENT_TYPE)) == 1

    async def test_health_follows_time(self, plant_repository, care_log_repository, publisher, clock, settings, make_plant, day):
        await plant_repository.add(make_plant("p-1", last_watered_at=day(8)).model_copy(
            update={"health_status": HealthStatus.EXCELLENT}
        ))
        handler = RefreshPlantHealthCommandHandler(
            plant_repository, care_log_repository, event_publisher=publisher, clock=clock, settings=settings
        )

        clock.advance(days=6)
        (result,) = await handler.handle(RefreshPlantHealthCommand(user_id="user-1"))

        assert result.health_status == HealthStatus.GOOD
