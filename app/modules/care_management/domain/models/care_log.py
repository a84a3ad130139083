# 📄 File: app/modules/care_management/domain/models/care_log.py
# 🧭 Purpose (Layman Explanation):
# A diary line for a plant: what was done (watered, pruned, checked for pests...), when, and whether a problem was spotted
# 🧪 Purpose (Technical Summary):
# Immutable CareLogEntry record and the closed CareActivityType set; entries form an append-only history per plant instance
# 🔗 Dependencies:
# pydantic, datetime, uuid, enum, app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# care_log_processor.py, health_evaluator.py, care_log repository, log_care_activity command

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.shared.utils.clock import Timestamp


class CareActivityType(str, Enum):
    """Kinds of care a plant can receive"""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    PROPAGATION = "propagation"
    PEST_TREATMENT = "pest_treatment"
    DISEASE_TREATMENT = "disease_treatment"
    INSPECTION = "inspection"

    @property
    def has_reminder(self) -> bool:
        """Only watering and fertilizing carry a reminder schedule."""
        return self in (CareActivityType.WATERING, CareActivityType.FERTILIZING)

    @property
    def reports_condition(self) -> bool:
        """Activities whose log can report a detected problem."""
        return self in (
            CareActivityType.INSPECTION,
            CareActivityType.PEST_TREATMENT,
            CareActivityType.DISEASE_TREATMENT,
        )


class CareLogEntry(BaseModel):
    """
    One recorded care activity.

    next_scheduled_at is informational: it is stamped when the entry is
    applied and never used as the authority for later due dates.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    plant_instance_id: str
    activity_type: CareActivityType
    performed_at: Timestamp
    notes: Optional[str] = Field(None, max_length=2000)
    photo_urls: Tuple[str, ...] = ()
    problem_detected: bool = False
    next_scheduled_at: Optional[Timestamp] = None
    created_at: Timestamp = Field(default_factory=lambda: datetime.now(timezone.utc))
