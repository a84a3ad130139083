# 📄 File: app/modules/care_management/application/commands/log_care_activity.py
# 🧭 Purpose (Layman Explanation):
# The "I just watered my fern" request: which plant, what was done, when, and whether anything looked wrong
#
# 🧪 Purpose (Technical Summary):
# CQRS command for submitting a care log entry; converted to a CareLogEntry and applied by the care log processor
#
# 🔗 Dependencies:
# - pydantic for command validation and serialization
# - app.modules.care_management.domain.models.care_log (CareLogEntry, CareActivityType)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.command_handlers (LogCareActivityCommandHandler)
# - app.modules.care_management.presentation.api.v1.care (care log endpoint)

"""
Log Care Activity Command

Command Fields:
- plant_instance_id: Plant the activity was performed on (required)
- activity_type: Kind of care performed (required)
- performed_at: When the activity happened; must not be in the future or
  before the plant was acquired
- notes: Free-text notes (optional, informational only)
- problem_detected: Structured problem flag for inspections and treatments
- entry_id: Client-supplied id; resubmitting the same id is a no-op
- timezone: Owner timezone for the recomputed due dates (optional)
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.care_management.domain.models.care_log import CareActivityType, CareLogEntry


class LogCareActivityCommand(BaseModel):
    """Command for recording a care activity on a plant instance."""

    plant_instance_id: str = Field(
        ...,
        description="ID of the plant instance the activity was performed on",
        examples=["123e4567-e89b-12d3-a456-426614174000"]
    )
    activity_type: CareActivityType = Field(
        ...,
        description="Kind of care performed",
        examples=["watering"]
    )
    performed_at: datetime = Field(
        ...,
        description="When the activity was performed (naive values are read as UTC)",
        examples=["2024-01-15T09:30:00Z"]
    )
    notes: Optional[str] = Field(
        default=None,
        max_length=2000,
        description="Free-text notes"
    )
    photo_urls: List[str] = Field(
        default_factory=list,
        max_length=10,
        description="URLs of photos already uploaded to storage"
    )
    problem_detected: bool = Field(
        default=False,
        description="Whether an inspection or treatment found a problem"
    )
    entry_id: Optional[str] = Field(
        default=None,
        description="Client-supplied entry id for idempotent resubmission"
    )
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone used for the recomputed due dates",
        examples=["Europe/Berlin"]
    )

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        return v or None

    def to_entry(self) -> CareLogEntry:
        """Build the domain care log entry for this command."""
        return CareLogEntry(
            id=self.entry_id or str(uuid.uuid4()),
            plant_instance_id=self.plant_instance_id,
            activity_type=self.activity_type,
            performed_at=self.performed_at,
            notes=self.notes,
            photo_urls=tuple(self.photo_urls),
            problem_detected=self.problem_detected,
        )
