# 📄 File: app/modules/care_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the plant care data models - plant species, the user's own plants, reminders, care diary entries and due reminders
# 🧪 Purpose (Technical Summary):
# Package initialization for care management domain models and their closed enumerations
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, presentation schemas

"""
Care Management Domain Models

Models:
- PlantCatalogEntry: Species record read from the plant catalog
- PlantInstance: A specific plant owned by a user
- ReminderConfig: Per-activity reminder configuration
- CareLogEntry: Immutable record of a performed care activity
- DueState: Derived reminder state (never persisted)

All timestamps are timezone-aware; naive inputs are read as UTC.
"""

from .plant_catalog import (
    PlantCatalogEntry,
    PlantCategory,
    DifficultyLevel,
    LightLevel,
    HumidityLevel,
    SoilType,
    GrowthRate,
    ToxicityLevel,
    PropagationMethod,
    TemperatureRange,
    TemperatureUnit,
    FertilizerInfo,
)

from .reminder import (
    ReminderConfig,
    CareFrequency,
    NotificationMethod,
)

from .care_log import (
    CareLogEntry,
    CareActivityType,
)

from .plant_instance import (
    PlantInstance,
    HealthStatus,
)

from .due_state import (
    DueState,
    DueStatus,
    ReminderWindow,
)

__all__ = [
    # Catalog
    "PlantCatalogEntry",
    "PlantCategory",
    "DifficultyLevel",
    "LightLevel",
    "HumidityLevel",
    "SoilType",
    "GrowthRate",
    "ToxicityLevel",
    "PropagationMethod",
    "TemperatureRange",
    "TemperatureUnit",
    "FertilizerInfo",

    # Reminders
    "ReminderConfig",
    "CareFrequency",
    "NotificationMethod",

    # Care logs
    "CareLogEntry",
    "CareActivityType",

    # Plant instances
    "PlantInstance",
    "HealthStatus",

    # Derived state
    "DueState",
    "DueStatus",
    "ReminderWindow",
]
