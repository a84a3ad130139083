# 📄 File: app/modules/care_management/application/queries/list_reminders.py
# 🧭 Purpose (Layman Explanation):
# The "what do my plants need?" question for one user, answered on their own calendar
#
# 🧪 Purpose (Technical Summary):
# CQRS query for the ordered DueState read model of all of a user's plant instances
#
# 🔗 Dependencies:
# - pydantic for query validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.query_handlers (ListRemindersQueryHandler)
# - app.modules.care_management.presentation.api.v1.care (reminders endpoint)
# - app.background_jobs.tasks.care_reminders

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.due_state import DueStatus


class ListRemindersQuery(BaseModel):
    """Query for a user's current care reminders."""

    user_id: str = Field(..., min_length=1)
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone of the user; defaults to the configured timezone",
        examples=["Europe/Berlin"]
    )
    now: Optional[datetime] = Field(
        default=None,
        description="Evaluation instant; defaults to the handler's clock"
    )
    statuses: Optional[List[DueStatus]] = Field(
        default=None,
        description="Restrict results to these statuses"
    )
