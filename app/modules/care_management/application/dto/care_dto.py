# 📄 File: app/modules/care_management/application/dto/care_dto.py
# 🧭 Purpose (Layman Explanation):
# Standard packages of plant care information (reminders, health grades, logged care, plant details) passed from the care logic to the API and background jobs
#
# 🧪 Purpose (Technical Summary):
# Read-model data transfer objects built from domain entities via from_domain, decoupling handlers' callers from domain model internals
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
# - app.modules.care_management.domain.models / services
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers (handlers return DTOs)
# - app.modules.care_management.presentation.api (response schemas)
# - app.background_jobs.tasks.care_reminders

"""
Care Data Transfer Objects (DTOs)

DTO Classes:
- DueStateDTO: One reminder (plant, activity, due instant, status)
- PlantHealthDTO: Health evaluation for one plant
- CareLogResultDTO: Outcome of a care log submission
- PlantInstanceDTO: Registered plant details
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.due_state import DueState, DueStatus
from app.modules.care_management.domain.models.plant_instance import HealthStatus, PlantInstance
from app.modules.care_management.domain.models.reminder import NotificationMethod, ReminderConfig
from app.modules.care_management.domain.services.care_log_processor import CareLogResult


class DueStateDTO(BaseModel):
    """A care reminder as handed to the API and the notification dispatcher."""

    plant_instance_id: str
    user_id: str
    activity_type: CareActivityType
    due_at: datetime = Field(..., description="Due instant in the user's timezone")
    status: DueStatus
    days_overdue: int = 0
    notification_method: NotificationMethod

    @classmethod
    def from_domain(cls, state: DueState) -> "DueStateDTO":
        return cls(
            plant_instance_id=state.plant_instance_id,
            user_id=state.user_id,
            activity_type=state.activity_type,
            due_at=state.due_at,
            status=state.status,
            days_overdue=state.days_overdue,
            notification_method=state.notification_method,
        )

    def to_domain(self) -> DueState:
        return DueState(**self.model_dump())


class PlantHealthDTO(BaseModel):
    """Result of a health evaluation."""

    plant_instance_id: str
    health_status: HealthStatus
    previous_status: HealthStatus = Field(..., description="Status stored before this evaluation")
    next_due: Dict[CareActivityType, Optional[datetime]] = Field(default_factory=dict)
    evaluated_at: datetime

    @property
    def changed(self) -> bool:
        return self.health_status != self.previous_status


class PlantInstanceDTO(BaseModel):
    """Registered plant details."""

    id: str
    user_id: str
    catalog_entry_id: str
    nickname: Optional[str] = None
    location: Optional[str] = None
    acquired_at: datetime
    last_watered_at: Optional[datetime] = None
    last_fertilized_at: Optional[datetime] = None
    watering_reminder: ReminderConfig
    fertilizing_reminder: Optional[ReminderConfig] = None
    health_status: HealthStatus

    @classmethod
    def from_domain(cls, instance: PlantInstance) -> "PlantInstanceDTO":
        return cls(
            id=instance.id,
            user_id=instance.user_id,
            catalog_entry_id=instance.catalog_entry_id,
            nickname=instance.nickname,
            location=instance.location,
            acquired_at=instance.acquired_at,
            last_watered_at=instance.last_watered_at,
            last_fertilized_at=instance.last_fertilized_at,
            watering_reminder=instance.watering_reminder,
            fertilizing_reminder=instance.fertilizing_reminder,
            health_status=instance.health_status,
        )


class CareLogResultDTO(BaseModel):
    """Outcome of a care log submission."""

    care_log_id: str
    plant_instance_id: str
    activity_type: CareActivityType
    performed_at: datetime
    applied: bool = Field(..., description="False when the entry id had already been logged")
    last_watered_at: Optional[datetime] = None
    last_fertilized_at: Optional[datetime] = None
    next_due: Dict[CareActivityType, Optional[datetime]] = Field(default_factory=dict)
    health_status: HealthStatus
    history_size: int

    @classmethod
    def from_domain(cls, result: CareLogResult) -> "CareLogResultDTO":
        return cls(
            care_log_id=result.entry.id,
            plant_instance_id=result.instance.id,
            activity_type=result.entry.activity_type,
            performed_at=result.entry.performed_at,
            applied=result.applied,
            last_watered_at=result.instance.last_watered_at,
            last_fertilized_at=result.instance.last_fertilized_at,
            next_due=result.next_due,
            health_status=result.instance.health_status,
            history_size=len(result.history),
        )


class ReminderListDTO(BaseModel):
    """A user's reminders at one instant."""

    user_id: str
    timezone: str
    evaluated_at: datetime
    reminders: List[DueStateDTO] = Field(default_factory=list)

    @property
    def actionable(self) -> List[DueStateDTO]:
        """Reminders that are due or overdue."""
        return [r for r in self.reminders if r.status != DueStatus.UPCOMING]
