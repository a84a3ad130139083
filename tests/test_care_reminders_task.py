"""Tests for the background reminder evaluation tasks."""

import asyncio

import pytest

from app.background_jobs.tasks import care_reminders
from app.modules.care_management.domain.events.care_events import CareRemindersDue, PlantHealthChanged
from app.modules.care_management.domain.models.plant_instance import HealthStatus


@pytest.fixture()
def wired(monkeypatch, plant_repository, care_log_repository, publisher, clock, settings):
    monkeypatch.setattr(care_reminders, "get_plant_repository", lambda: plant_repository)
    monkeypatch.setattr(care_reminders, "get_care_log_repository", lambda: care_log_repository)
    monkeypatch.setattr(care_reminders, "get_event_publisher", lambda: publisher)
    monkeypatch.setattr(care_reminders, "get_clock", lambda: clock)
    monkeypatch.setattr(care_reminders, "get_settings", lambda: settings)
    return plant_repository


def test_publishes_actionable_reminders(wired, publisher, make_plant, day):
    asyncio.run(wired.add(make_plant("p-1").model_copy(update={"health_status": HealthStatus.EXCELLENT})))
    asyncio.run(wired.add(make_plant("p-2", last_watered_at=day(4)).model_copy(
        update={"health_status": HealthStatus.EXCELLENT}
    )))  # upcoming only

    result = care_reminders.evaluate_care_reminders("user-1", timezone="Europe/Berlin")

    assert result["status"] == "completed"
    assert result["plants_evaluated"] == 2
    assert result["reminders"] == 2
    assert result["actionable"] == 1
    assert result["health_changes"] == 1

    (event,) = publisher.published_events(CareRemindersDue.EVENT_TYPE)
    assert event.event_id == result["event_id"]
    assert event.user_id == "user-1"
    assert [reminder["plant_instance_id"] for reminder in event.reminders] == ["p-1"]
    assert event.reminders[0]["status"] == "overdue"
    assert event.data["timezone"] == "Europe/Berlin"
    assert len(publisher.published_events(PlantHealthChanged.EVENT_TYPE)) == 1
    assert asyncio.run(wired.get_by_id("p-1")).health_status == HealthStatus.GOOD


def test_nothing_actionable_publishes_nothing(wired, publisher, make_plant, day):
    asyncio.run(wired.add(make_plant("p-1", last_watered_at=day(9))))

    result = care_reminders.evaluate_care_reminders("user-1")

    assert result["actionable"] == 0
    assert result["event_id"] is None
    assert publisher.published_events(CareRemindersDue.EVENT_TYPE) == []


def test_bad_timezone_is_reported_not_raised(wired, make_plant):
    asyncio.run(wired.add(make_plant("p-1")))

    result = care_reminders.evaluate_care_reminders("user-1", timezone="Nowhere/Special")

    assert result["status"] == "rejected"
    assert result["error"]["code"] == "INVALID_CONFIG"


def test_fan_out_queues_every_owner(wired, monkeypatch, make_plant):
    queued = []
    monkeypatch.setattr(care_reminders.evaluate_care_reminders, "delay", lambda user_id: queued.append(user_id))
    for plant_id, user_id in [("p-1", "user-b"), ("p-2", "user-a"), ("p-3", "user-b")]:
        asyncio.run(wired.add(make_plant(plant_id, user_id=user_id)))

    result = care_reminders.evaluate_all_care_reminders()

    assert queued == ["user-a", "user-b"]
    assert result == {"status": "queued", "users": 2}
