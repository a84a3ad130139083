# 📄 File: app/modules/care_management/domain/models/plant_instance.py
# 🧭 Purpose (Layman Explanation):
# One specific plant a user owns: when they got it, when it was last watered and fed, how its reminders are set up, and how healthy it looks
# 🧪 Purpose (Technical Summary):
# PlantInstance aggregate and HealthStatus scale; processor-owned fields (last_watered_at, last_fertilized_at, health_status) change only through care log application
# 🔗 Dependencies:
# pydantic, datetime, uuid, enum, reminder.py, care_log.py, plant_catalog.py, app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# care_log_processor.py, health_evaluator.py, reminder_scheduler.py, plant instance repository, register_plant handler

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.plant_catalog import PlantCatalogEntry
from app.modules.care_management.domain.models.reminder import NotificationMethod, ReminderConfig
from app.shared.utils.clock import Timestamp


class HealthStatus(str, Enum):
    """Plant health, best to worst"""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """0 for EXCELLENT up to 4 for CRITICAL."""
        return _HEALTH_SCALE.index(self)

    def degrade(self, levels: int = 1) -> "HealthStatus":
        """Move down the scale, flooring at CRITICAL."""
        return _HEALTH_SCALE[min(self.rank + max(levels, 0), len(_HEALTH_SCALE) - 1)]


_HEALTH_SCALE: List[HealthStatus] = list(HealthStatus)

# Reminder-bearing activities -> (reminder field, last-performed field)
REMINDER_FIELDS: Dict[CareActivityType, Tuple[str, str]] = {
    CareActivityType.WATERING: ("watering_reminder", "last_watered_at"),
    CareActivityType.FERTILIZING: ("fertilizing_reminder", "last_fertilized_at"),
}


class PlantInstance(BaseModel):
    """
    A user's plant.

    Instances are immutable values; updates produce a new instance via
    model_copy so that callers holding the previous state never see it change.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str
    catalog_entry_id: str
    nickname: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    acquired_at: Timestamp
    last_watered_at: Optional[Timestamp] = None
    last_fertilized_at: Optional[Timestamp] = None
    notes: Optional[str] = None
    watering_reminder: ReminderConfig
    fertilizing_reminder: Optional[ReminderConfig] = None
    health_status: HealthStatus = HealthStatus.GOOD
    created_at: Timestamp = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Timestamp = Field(default_factory=lambda: datetime.now(timezone.utc))

    def reminder_for(self, activity: CareActivityType) -> Optional[ReminderConfig]:
        """Reminder configured for an activity, None for activities without one."""
        fields = REMINDER_FIELDS.get(activity)
        return getattr(self, fields[0]) if fields else None

    def last_performed_at(self, activity: CareActivityType) -> Optional[datetime]:
        fields = REMINDER_FIELDS.get(activity)
        return getattr(self, fields[1]) if fields else None

    def enabled_reminders(self) -> List[Tuple[CareActivityType, ReminderConfig]]:
        """Enabled reminders in activity order (watering, fertilizing)."""
        reminders = []
        for activity in REMINDER_FIELDS:
            config = self.reminder_for(activity)
            if config is not None and config.enabled:
                reminders.append((activity, config))
        return reminders

    @classmethod
    def create_from_catalog(
        cls,
        user_id: str,
        catalog_entry: PlantCatalogEntry,
        acquired_at: datetime,
        nickname: Optional[str] = None,
        location: Optional[str] = None,
        notes: Optional[str] = None,
        watering_reminder: Optional[ReminderConfig] = None,
        fertilizing_reminder: Optional[ReminderConfig] = None,
        default_reminder_time: Optional[str] = None,
        notification_method: NotificationMethod = NotificationMethod.IN_APP,
    ) -> "PlantInstance":
        """
        Create a new plant instance, seeding reminders from the catalog
        entry's watering and fertilizer frequencies when none are supplied.
        """
        if watering_reminder is None:
            watering_reminder = ReminderConfig.from_catalog(
                catalog_entry.watering_frequency,
                time_of_day=default_reminder_time,
                notification_method=notification_method,
            )

        if fertilizing_reminder is None and catalog_entry.fertilizing_frequency is not None:
            fertilizing_reminder = ReminderConfig.from_catalog(
                catalog_entry.fertilizing_frequency,
                time_of_day=default_reminder_time,
                notification_method=notification_method,
            )

        return cls(
            user_id=user_id,
            catalog_entry_id=catalog_entry.id,
            nickname=nickname,
            location=location,
            notes=notes,
            acquired_at=acquired_at,
            watering_reminder=watering_reminder,
            fertilizing_reminder=fertilizing_reminder,
        )
