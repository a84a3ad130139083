# 📄 File: app/modules/care_management/application/queries/get_plant_health.py
# 🧭 Purpose (Layman Explanation):
# The "how is my plant doing?" question for a single plant
#
# 🧪 Purpose (Technical Summary):
# CQRS query evaluating a plant instance's health from its stored state and care history
#
# 🔗 Dependencies:
# - pydantic for query validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.query_handlers (GetPlantHealthQueryHandler)
# - app.modules.care_management.presentation.api.v1.care (plant health endpoint)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GetPlantHealthQuery(BaseModel):
    """Query for the current health of one plant instance."""

    plant_instance_id: str = Field(..., min_length=1)
    timezone: Optional[str] = Field(default=None, examples=["America/New_York"])
    now: Optional[datetime] = None
