# 📄 File: app/modules/care_management/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# Describes how often a plant should be cared for and when the owner wants to be reminded (which weekday, what time, by which channel)
# 🧪 Purpose (Technical Summary):
# ReminderConfig value object plus the closed CareFrequency / NotificationMethod sets; invariant violations raise InvalidConfigError
# 🔗 Dependencies:
# pydantic, enum, re, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# plant_instance.py, frequency_resolver.py, due_date_calculator.py, register_plant command, care API schemas

import re
from datetime import time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from app.shared.core.exceptions import InvalidConfigError

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class CareFrequency(str, Enum):
    """How often a care activity recurs"""
    DAILY = "daily"
    EVERY_2_DAYS = "every_2_days"
    EVERY_3_DAYS = "every_3_days"
    WEEKLY = "weekly"
    EVERY_2_WEEKS = "every_2_weeks"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    AS_NEEDED = "as_needed"      # Never scheduled
    CUSTOM = "custom"            # Uses ReminderConfig.interval_days


class NotificationMethod(str, Enum):
    """Channel a reminder should be delivered through (delivery itself lives elsewhere)"""
    IN_APP = "in_app"
    EMAIL = "email"
    PUSH = "push"
    SMS = "sms"


class ReminderConfig(BaseModel):
    """
    Reminder configuration for one care activity of one plant.

    - enabled: disabled reminders are never scheduled
    - frequency: recurrence of the activity
    - interval_days: required (>= 1) when frequency is CUSTOM
    - day_of_week: 0-6 with 0 = Sunday; due dates advance forward to this weekday
    - time_of_day: 24-hour "HH:MM" in the owner's timezone, default local midnight
    - notification_method: preferred delivery channel
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    frequency: CareFrequency
    interval_days: Optional[int] = None
    day_of_week: Optional[int] = None
    time_of_day: Optional[str] = None
    notification_method: NotificationMethod = NotificationMethod.IN_APP

    @model_validator(mode="after")
    def _check_invariants(self) -> "ReminderConfig":
        self.ensure_valid()
        return self

    def ensure_valid(self) -> None:
        """
        Check the configuration invariants.

        Raises:
            InvalidConfigError: On the first violated invariant
        """
        if self.frequency == CareFrequency.CUSTOM:
            if self.interval_days is None or isinstance(self.interval_days, bool) or self.interval_days < 1:
                raise InvalidConfigError(
                    message="Custom frequency requires a positive interval_days",
                    field="interval_days",
                    value=self.interval_days,
                )

        if self.day_of_week is not None and not 0 <= self.day_of_week <= 6:
            raise InvalidConfigError(
                message="day_of_week must be between 0 (Sunday) and 6 (Saturday)",
                field="day_of_week",
                value=self.day_of_week,
            )

        if self.time_of_day is not None and not TIME_OF_DAY_PATTERN.match(self.time_of_day):
            raise InvalidConfigError(
                message="time_of_day must be a 24-hour HH:MM value",
                field="time_of_day",
                value=self.time_of_day,
            )

    @property
    def reminder_time(self) -> time:
        """Wall-clock time reminders fire at (midnight when unset)."""
        if self.time_of_day is None:
            return time(0, 0)
        hours, minutes = self.time_of_day.split(":")
        return time(int(hours), int(minutes))

    @property
    def is_schedulable(self) -> bool:
        return self.enabled and self.frequency != CareFrequency.AS_NEEDED

    @classmethod
    def from_catalog(
        cls,
        frequency: CareFrequency,
        time_of_day: Optional[str] = None,
        notification_method: NotificationMethod = NotificationMethod.IN_APP,
    ) -> "ReminderConfig":
        """Seed a reminder from a catalog care frequency (catalog frequencies are never CUSTOM)."""
        return cls(
            enabled=frequency != CareFrequency.AS_NEEDED,
            frequency=frequency,
            time_of_day=time_of_day,
            notification_method=notification_method,
        )
