"""
Shared test fixtures for the plant care test suite.

Provides:
- A fixed clock and day helper anchored at 2024-01-01 00:00 UTC
- A sample catalog entry (weekly watering, monthly fertilizing)
- A plant factory with sensible reminder defaults
- In-memory repositories and a fresh event publisher

Usage:
    def test_example(make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        assert plant.last_watered_at == day(5)
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from app.modules.care_management.domain.models.plant_catalog import (
    DifficultyLevel,
    FertilizerInfo,
    GrowthRate,
    HumidityLevel,
    LightLevel,
    PlantCatalogEntry,
    PlantCategory,
    SoilType,
    TemperatureRange,
)
from app.modules.care_management.domain.models.plant_instance import PlantInstance
from app.modules.care_management.domain.models.reminder import CareFrequency, ReminderConfig
from app.modules.care_management.infrastructure.memory.repositories import (
    InMemoryCareLogRepository,
    InMemoryPlantCatalogRepository,
    InMemoryPlantInstanceRepository,
)
from app.shared.config.settings import Settings
from app.shared.events.publisher import EventPublisher
from app.shared.utils.clock import FixedClock

logging.getLogger("app").setLevel(logging.WARNING)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)  # a Monday


def at_day(n: float) -> datetime:
    return T0 + timedelta(days=n)


# ============================== Time ======================================


@pytest.fixture()
def day():
    """Day offset helper: day(8) is 2024-01-09 00:00 UTC."""
    return at_day


@pytest.fixture()
def clock():
    """Clock frozen at day 10."""
    return FixedClock(at_day(10))


@pytest.fixture()
def settings():
    return Settings(ENVIRONMENT="test", DEFAULT_TIMEZONE="UTC")


# ============================== Catalog ===================================


@pytest.fixture()
def catalog_entry():
    return PlantCatalogEntry(
        id="monstera-deliciosa",
        name="Monstera",
        scientific_name="Monstera deliciosa",
        category=PlantCategory.FOLIAGE,
        difficulty=DifficultyLevel.BEGINNER,
        watering_frequency=CareFrequency.WEEKLY,
        light_requirement=LightLevel.INDIRECT,
        temperature=TemperatureRange(min=18, max=27),
        humidity=HumidityLevel.MODERATE,
        soil_type=SoilType.POTTING_MIX,
        fertilizer=FertilizerInfo(type="liquid", npk_ratio="10-10-10", frequency=CareFrequency.MONTHLY),
        growth_rate=GrowthRate.MODERATE,
    )


# ============================== Plants ====================================


def build_plant(
    plant_id: str = "plant-1",
    user_id: str = "user-1",
    watering: Optional[CareFrequency] = CareFrequency.WEEKLY,
    fertilizing: Optional[CareFrequency] = None,
    acquired_at: datetime = T0,
    **fields,
) -> PlantInstance:
    fields.setdefault(
        "watering_reminder",
        ReminderConfig(frequency=watering) if watering else ReminderConfig(enabled=False, frequency=CareFrequency.WEEKLY),
    )
    if fertilizing is not None:
        fields.setdefault("fertilizing_reminder", ReminderConfig(frequency=fertilizing))
    return PlantInstance(
        id=plant_id,
        user_id=user_id,
        catalog_entry_id="monstera-deliciosa",
        acquired_at=acquired_at,
        **fields,
    )


@pytest.fixture()
def make_plant():
    """Plant factory; weekly watering and no fertilizing reminder by default."""
    return build_plant


# ============================== Infrastructure ============================


@pytest.fixture()
def plant_repository():
    return InMemoryPlantInstanceRepository()


@pytest.fixture()
def care_log_repository():
    return InMemoryCareLogRepository()


@pytest.fixture()
def catalog_repository(catalog_entry):
    return InMemoryPlantCatalogRepository([catalog_entry])


@pytest.fixture()
def publisher():
    return EventPublisher()
