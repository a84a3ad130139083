"""Tests for in-process domain event publishing."""

import pytest

from app.modules.care_management.domain.events.care_events import CareActivityLogged, PlantHealthChanged
from app.modules.care_management.domain.models.care_log import CareActivityType, CareLogEntry
from app.modules.care_management.domain.models.plant_instance import HealthStatus


def health_event():
    return PlantHealthChanged(
        plant_id="plant-1",
        user_id="user-1",
        previous_status=HealthStatus.EXCELLENT,
        new_status=HealthStatus.FAIR,
    )


async def test_handlers_receive_subscribed_events(publisher):
    received = []
    publisher.subscribe(PlantHealthChanged.EVENT_TYPE, received.append)

    event_id = await publisher.publish(health_event())

    assert [event.event_id for event in received] == [event_id]
    assert received[0].data["degraded"] is True
    assert received[0].health_status == "fair"


async def test_async_handlers_are_awaited(publisher):
    received = []

    async def handler(event):
        received.append(event.event_type)

    publisher.subscribe(PlantHealthChanged.EVENT_TYPE, handler)
    await publisher.publish(health_event())

    assert received == [PlantHealthChanged.EVENT_TYPE]


async def test_handler_failure_is_isolated(publisher):
    received = []

    def broken(event):
        raise RuntimeError("dispatcher offline")

    publisher.subscribe(PlantHealthChanged.EVENT_TYPE, broken)
    publisher.subscribe(PlantHealthChanged.EVENT_TYPE, received.append)

    await publisher.publish(health_event())

    assert len(received) == 1
    assert publisher.get_publisher_metrics()["failed_count"] == 1


async def test_history_filters_by_type(publisher, day):
    entry = CareLogEntry(plant_instance_id="plant-1", activity_type=CareActivityType.WATERING, performed_at=day(1))

    await publisher.publish_all([CareActivityLogged("user-1", entry), health_event()])

    assert len(publisher.published_events()) == 2
    (logged,) = publisher.published_events(CareActivityLogged.EVENT_TYPE)
    assert logged.care_type == "watering"
    assert logged.data["care_log_id"] == entry.id


def test_event_serializes_payload_and_metadata(day):
    entry = CareLogEntry(plant_instance_id="plant-1", activity_type=CareActivityType.WATERING, performed_at=day(1))
    event = CareActivityLogged("user-1", entry, correlation_id="req-7")

    payload = event.to_dict()

    assert payload["event_type"] == CareActivityLogged.EVENT_TYPE
    assert payload["data"]["plant_id"] == "plant-1"
    assert payload["metadata"]["category"] == "care"
    assert payload["metadata"]["user_id"] == "user-1"
    assert payload["metadata"]["correlation_id"] == "req-7"
    assert '"care.activity_logged"' in event.to_json()


def test_event_requires_scoping_fields():
    with pytest.raises(ValueError, match="plant_id"):
        PlantHealthChanged(
            plant_id=None,
            user_id="user-1",
            previous_status=HealthStatus.GOOD,
            new_status=HealthStatus.FAIR,
        )


async def test_publish_stamps_correlation_id(publisher):
    event = health_event()

    await publisher.publish(event, correlation_id="job-42")

    assert event.metadata.correlation_id == "job-42"


async def test_unsubscribed_handler_stops_receiving(publisher):
    received = []
    everything = []
    publisher.subscribe(PlantHealthChanged.EVENT_TYPE, received.append)
    publisher.subscribe("*", everything.append)

    await publisher.publish(health_event())
    publisher.unsubscribe(PlantHealthChanged.EVENT_TYPE, received.append)
    publisher.unsubscribe(PlantHealthChanged.EVENT_TYPE, received.append)
    await publisher.publish(health_event())

    assert len(received) == 1
    assert len(everything) == 2
    assert publisher.get_publisher_metrics()["subscriptions"][PlantHealthChanged.EVENT_TYPE] == 0
