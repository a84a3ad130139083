# 📄 File: app/modules/care_management/application/commands/register_plant.py
# 🧭 Purpose (Layman Explanation):
# The "I just got a new plant" request: which species it is, when it arrived, and optionally how its reminders should be set up
#
# 🧪 Purpose (Technical Summary):
# CQRS command creating a PlantInstance from a catalog entry; reminders not supplied are seeded from the catalog frequencies
#
# 🔗 Dependencies:
# - pydantic for command validation and serialization
# - app.modules.care_management.domain.models.reminder (ReminderConfig)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.command_handlers (RegisterPlantCommandHandler)
# - app.modules.care_management.presentation.api.v1.care (plant registration endpoint)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.reminder import NotificationMethod, ReminderConfig


class RegisterPlantCommand(BaseModel):
    """Command for registering a newly acquired plant."""

    user_id: str = Field(..., min_length=1, description="Owner of the plant")
    catalog_entry_id: str = Field(..., min_length=1, description="Species in the plant catalog")
    acquired_at: datetime = Field(..., description="When the plant was acquired")
    nickname: Optional[str] = Field(default=None, max_length=100, examples=["Fernando"])
    location: Optional[str] = Field(default=None, max_length=200, examples=["Living room window"])
    notes: Optional[str] = Field(default=None, max_length=2000)
    watering_reminder: Optional[ReminderConfig] = Field(
        default=None,
        description="Watering reminder; seeded from the catalog watering frequency when omitted"
    )
    fertilizing_reminder: Optional[ReminderConfig] = Field(
        default=None,
        description="Fertilizing reminder; seeded from the catalog fertilizer frequency when omitted"
    )
    default_reminder_time: Optional[str] = Field(
        default=None,
        pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
        description="HH:MM used for seeded reminders (falls back to the configured default)"
    )
    notification_method: NotificationMethod = Field(
        default=NotificationMethod.IN_APP,
        description="Delivery channel for seeded reminders"
    )
