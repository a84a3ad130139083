# 📄 File: app/modules/care_management/application/commands/refresh_plant_health.py
# 🧭 Purpose (Layman Explanation):
# Re-grades the health of all of a user's plants as time passes, since a plant can become "overdue" without anyone logging anything
#
# 🧪 Purpose (Technical Summary):
# CQRS command recomputing and persisting health_status for every plant instance of a user
#
# 🔗 Dependencies:
# - pydantic for command validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.command_handlers (RefreshPlantHealthCommandHandler)
# - app.background_jobs.tasks.care_reminders

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RefreshPlantHealthCommand(BaseModel):
    """Command recomputing the stored health of a user's plants."""

    user_id: str = Field(..., min_length=1)
    timezone: Optional[str] = None
    now: Optional[datetime] = None
