# 📄 File: app/modules/care_management/domain/models/due_state.py
# 🧭 Purpose (Layman Explanation):
# The "what needs doing soon" card: which plant, which chore, when it is due, and whether it is coming up, due now, or late
# 🧪 Purpose (Technical Summary):
# Derived DueState read model, DueStatus classification and the ReminderWindow policy (lookahead and grace period) used to classify due dates
# 🔗 Dependencies:
# pydantic, datetime, enum, care_log.py, reminder.py
# 🔄 Connected Modules / Calls From:
# reminder_scheduler.py, health_evaluator.py, care_log_processor.py, list_reminders query handler, background reminder job

from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.reminder import NotificationMethod

DEFAULT_LOOKAHEAD = timedelta(hours=48)
DEFAULT_GRACE_PERIOD = timedelta(hours=24)


class DueStatus(str, Enum):
    """Where a due date sits relative to now"""
    UPCOMING = "upcoming"   # Within the lookahead, not yet due
    DUE = "due"             # Due, still within the grace period
    OVERDUE = "overdue"     # Past the grace period

    @property
    def priority(self) -> int:
        """Listing order: overdue first, then due, then upcoming."""
        return {DueStatus.OVERDUE: 0, DueStatus.DUE: 1, DueStatus.UPCOMING: 2}[self]


class ReminderWindow(BaseModel):
    """Lookahead and grace period bounding the DUE / UPCOMING classifications"""

    model_config = ConfigDict(frozen=True)

    lookahead: timedelta = DEFAULT_LOOKAHEAD
    grace_period: timedelta = DEFAULT_GRACE_PERIOD

    @field_validator("lookahead", "grace_period")
    @classmethod
    def validate_non_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("Reminder window durations cannot be negative")
        return v

    @classmethod
    def from_settings(cls, settings) -> "ReminderWindow":
        return cls(lookahead=settings.reminder_lookahead, grace_period=settings.reminder_grace_period)


class DueState(BaseModel):
    """A reminder surfaced to the owner. Derived on demand, never stored."""

    model_config = ConfigDict(frozen=True)

    plant_instance_id: str
    user_id: str
    activity_type: CareActivityType
    due_at: datetime
    status: DueStatus
    days_overdue: int = 0
    notification_method: NotificationMethod = NotificationMethod.IN_APP

    @property
    def sort_key(self) -> Tuple[int, datetime, str, str]:
        return (self.status.priority, self.due_at, self.plant_instance_id, self.activity_type.value)
