# 📄 File: app/modules/care_management/presentation/api/schemas/care_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the data formats the plant care API accepts and returns: new plants, care log submissions, reminders and health grades
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the care endpoints, converting requests to CQRS commands and DTOs to responses
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.care_management.application (commands, DTOs)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.api.v1.care (care endpoints)
# - FastAPI automatic request validation and response serialization

"""
Care Management API Schemas

Request Schemas:
- RegisterPlantRequest: Register a newly acquired plant
- LogCareActivityRequest: Record a care activity

Response Schemas:
- PlantResponse: Registered plant details
- CareLogResponse: Outcome of a care log submission
- PlantHealthResponse: Current health evaluation
- ReminderResponse / ReminderListResponse: Ordered reminders for a user
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.care_management.application.commands.log_care_activity import LogCareActivityCommand
from app.modules.care_management.application.commands.register_plant import RegisterPlantCommand
from app.modules.care_management.application.dto.care_dto import (
    CareLogResultDTO,
    PlantHealthDTO,
    PlantInstanceDTO,
    ReminderListDTO,
)
from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.due_state import DueStatus
from app.modules.care_management.domain.models.plant_instance import HealthStatus
from app.modules.care_management.domain.models.reminder import NotificationMethod, ReminderConfig


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class RegisterPlantRequest(BaseModel):
    """Plant registration request."""

    user_id: str = Field(..., min_length=1)
    catalog_entry_id: str = Field(..., min_length=1)
    acquired_at: datetime
    nickname: Optional[str] = Field(default=None, max_length=100)
    location: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = Field(default=None, max_length=2000)
    watering_reminder: Optional[ReminderConfig] = None
    fertilizing_reminder: Optional[ReminderConfig] = None
    default_reminder_time: Optional[str] = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    notification_method: NotificationMethod = NotificationMethod.IN_APP

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "catalog_entry_id": "monstera-deliciosa",
            "acquired_at": "2024-01-01T10:00:00Z",
            "nickname": "Monty",
            "location": "Living room",
            "watering_reminder": {
                "enabled": True,
                "frequency": "weekly",
                "day_of_week": 6,
                "time_of_day": "09:00",
                "notification_method": "push"
            }
        }
    })

    def to_command(self) -> RegisterPlantCommand:
        return RegisterPlantCommand(
            **self.model_dump(exclude={"watering_reminder", "fertilizing_reminder"}),
            watering_reminder=self.watering_reminder,
            fertilizing_reminder=self.fertilizing_reminder,
        )


class LogCareActivityRequest(BaseModel):
    """Care log submission for the plant in the URL path."""

    activity_type: CareActivityType
    performed_at: datetime
    notes: Optional[str] = Field(default=None, max_length=2000)
    photo_urls: List[str] = Field(default_factory=list, max_length=10)
    problem_detected: bool = False
    entry_id: Optional[str] = Field(
        default=None,
        description="Client-generated id; resubmitting the same id is a no-op"
    )
    timezone: Optional[str] = Field(default=None, examples=["Europe/Berlin"])

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "activity_type": "watering",
            "performed_at": "2024-01-15T09:30:00Z",
            "notes": "Soil was very dry",
            "entry_id": "3f6c1e9a-0b8d-4a8e-9f61-2c1d4f0a7b55"
        }
    })

    def to_command(self, plant_instance_id: str) -> LogCareActivityCommand:
        return LogCareActivityCommand(plant_instance_id=plant_instance_id, **self.model_dump())


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class PlantResponse(BaseModel):
    """Registered plant."""

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
    def from_dto(cls, dto: PlantInstanceDTO) -> "PlantResponse":
        return cls(
            **dto.model_dump(exclude={"watering_reminder", "fertilizing_reminder"}),
            watering_reminder=dto.watering_reminder,
            fertilizing_reminder=dto.fertilizing_reminder,
        )


class CareLogResponse(BaseModel):
    """Care log submission outcome."""

    care_log_id: str
    plant_instance_id: str
    activity_type: CareActivityType
    performed_at: datetime
    applied: bool
    last_watered_at: Optional[datetime] = None
    last_fertilized_at: Optional[datetime] = None
    next_due: Dict[CareActivityType, Optional[datetime]] = Field(default_factory=dict)
    health_status: HealthStatus

    @classmethod
    def from_dto(cls, dto: CareLogResultDTO) -> "CareLogResponse":
        return cls(**dto.model_dump(exclude={"history_size"}))


class PlantHealthResponse(BaseModel):
    """Current plant health."""

    plant_instance_id: str
    health_status: HealthStatus
    stored_status: HealthStatus = Field(..., description="Status stored on the plant before this evaluation")
    next_due: Dict[CareActivityType, Optional[datetime]] = Field(default_factory=dict)
    evaluated_at: datetime

    @classmethod
    def from_dto(cls, dto: PlantHealthDTO) -> "PlantHealthResponse":
        return cls(
            plant_instance_id=dto.plant_instance_id,
            health_status=dto.health_status,
            stored_status=dto.previous_status,
            next_due=dto.next_due,
            evaluated_at=dto.evaluated_at,
        )


class ReminderResponse(BaseModel):
    """One reminder."""

    plant_instance_id: str
    activity_type: CareActivityType
    due_at: datetime
    status: DueStatus
    days_overdue: int
    notification_method: NotificationMethod


class ReminderListResponse(BaseModel):
    """A user's reminders, overdue first."""

    user_id: str
    timezone: str
    evaluated_at: datetime
    total: int
    reminders: List[ReminderResponse]

    @classmethod
    def from_dto(cls, dto: ReminderListDTO) -> "ReminderListResponse":
        return cls(
            user_id=dto.user_id,
            timezone=dto.timezone,
            evaluated_at=dto.evaluated_at,
            total=len(dto.reminders),
            reminders=[ReminderResponse(**r.model_dump(exclude={"user_id"})) for r in dto.reminders],
        )
