# 📄 File: app/modules/care_management/domain/events/care_events.py
# 🧭 Purpose (Layman Explanation):
# Announcements the care system makes: "this plant was watered", "this plant's health changed", "these chores are due" - so notifications and analytics can react
# 🧪 Purpose (Technical Summary):
# Domain events for care log application, health transitions and reminder evaluation, built on the shared CareEvent / HealthEvent / UserEvent bases
# 🔗 Dependencies:
# app.shared.events.base, domain models
# 🔄 Connected Modules / Calls From:
# Command/query handlers, background reminder job, notification dispatch subscribers

from typing import List, Optional

from app.modules.care_management.domain.models.care_log import CareLogEntry
from app.modules.care_management.domain.models.due_state import DueState
from app.modules.care_management.domain.models.plant_instance import HealthStatus
from app.shared.events.base import CareEvent, HealthEvent, UserEvent


class CareActivityLogged(CareEvent):
    """
    Event fired when a care log entry is applied to a plant.

    Triggers:
    - Activity feed updates
    - Analytics tracking
    """
    EVENT_TYPE = "care.activity_logged"

    def __init__(self, user_id: str, entry: CareLogEntry, **kwargs):
        super().__init__(
            self.EVENT_TYPE,
            plant_id=entry.plant_instance_id,
            user_id=user_id,
            care_type=entry.activity_type.value,
            data={
                "care_log_id": entry.id,
                "performed_at": entry.performed_at.isoformat(),
                "problem_detected": entry.problem_detected,
                "next_scheduled_at": entry.next_scheduled_at.isoformat() if entry.next_scheduled_at else None,
            },
            **kwargs
        )


class PlantHealthChanged(HealthEvent):
    """
    Event fired when a recomputed health status differs from the stored one.

    Triggers:
    - Health alert notifications
    """
    EVENT_TYPE = "care.health_changed"

    def __init__(
        self,
        plant_id: str,
        user_id: str,
        previous_status: HealthStatus,
        new_status: HealthStatus,
        **kwargs
    ):
        super().__init__(
            self.EVENT_TYPE,
            plant_id=plant_id,
            user_id=user_id,
            health_status=new_status.value,
            data={
                "previous_status": previous_status.value,
                "degraded": new_status.rank > previous_status.rank,
            },
            **kwargs
        )


class CareRemindersDue(UserEvent):
    """
    Event fired when a reminder evaluation finds due or overdue care.

    The notification dispatcher consumes this and delivers through each
    reminder's notification method; the care engine never delivers itself.
    """
    EVENT_TYPE = "care.reminders_due"

    def __init__(self, user_id: str, reminders: List[DueState], timezone: Optional[str] = None, **kwargs):
        super().__init__(
            self.EVENT_TYPE,
            user_id=user_id,
            data={
                "timezone": timezone,
                "reminders": [reminder.model_dump(mode="json") for reminder in reminders],
            },
            **kwargs
        )

    @property
    def reminders(self) -> List[dict]:
        return self.data["reminders"]
