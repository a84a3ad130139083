# 📄 File: app/background_jobs/tasks/care_reminders.py
# 🧭 Purpose (Layman Explanation):
# Regularly checks every plant owner's plants as time passes, updates their health grades, and announces which watering or feeding chores are due
# 🧪 Purpose (Technical Summary):
# Celery tasks re-evaluating reminders and stored health per user; publishes CareRemindersDue for the notification dispatcher.
# Client errors (bad timezone, unknown user data) are reported in the task result and never retried.
# 🔗 Dependencies:
# celery shared_task, asyncio, care management handlers, app.shared.events.publisher
# 🔄 Connected Modules / Calls From:
# celery_config.py beat schedule, notification dispatch (CareRemindersDue subscribers)

"""
Care Reminder Tasks

- evaluate_care_reminders: one user; refresh health, then publish due/overdue reminders
- evaluate_all_care_reminders: fan out over every plant owner
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, Optional

from celery import shared_task

from app.modules.care_management.application.commands.refresh_plant_health import RefreshPlantHealthCommand
from app.modules.care_management.application.handlers.command_handlers import RefreshPlantHealthCommandHandler
from app.modules.care_management.application.handlers.query_handlers import ListRemindersQueryHandler
from app.modules.care_management.application.queries.list_reminders import ListRemindersQuery
from app.modules.care_management.domain.events.care_events import CareRemindersDue
from app.modules.care_management.presentation.dependencies import (
    get_care_log_repository,
    get_clock,
    get_plant_repository,
)
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import exception_to_dict, is_client_error
from app.shared.events.publisher import get_event_publisher
from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)


async def run_reminder_evaluation(
    user_id: str,
    timezone: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Refresh stored health, then publish the user's actionable reminders."""
    settings = get_settings()
    plant_repository = get_plant_repository()
    care_log_repository = get_care_log_repository()
    publisher = get_event_publisher()
    clock = get_clock()
    now = now or clock.now()

    refresh = RefreshPlantHealthCommandHandler(
        plant_repository, care_log_repository, event_publisher=publisher, clock=clock, settings=settings
    )
    health = await refresh.handle(RefreshPlantHealthCommand(user_id=user_id, timezone=timezone, now=now))

    listing = ListRemindersQueryHandler(plant_repository, clock=clock, settings=settings)
    reminders = await listing.handle(ListRemindersQuery(user_id=user_id, timezone=timezone, now=now))

    actionable = reminders.actionable
    event_id = None
    if actionable:
        event_id = await publisher.publish(CareRemindersDue(
            user_id=user_id,
            reminders=[reminder.to_domain() for reminder in actionable],
            timezone=reminders.timezone,
        ))

    return {
        "status": "completed",
        "user_id": user_id,
        "timezone": reminders.timezone,
        "evaluated_at": reminders.evaluated_at.isoformat(),
        "plants_evaluated": len(health),
        "health_changes": sum(1 for result in health if result.changed),
        "reminders": len(reminders.reminders),
        "actionable": len(actionable),
        "event_id": event_id,
    }


@shared_task(name="app.background_jobs.tasks.care_reminders.evaluate_care_reminders", ignore_result=False)
def evaluate_care_reminders(user_id: str, timezone: Optional[str] = None) -> Dict[str, Any]:
    """
    Re-evaluate one user's reminders at the current instant.

    Returns a summary dict; configuration errors are returned as
    ``{"status": "rejected", ...}`` rather than raised so the task is not retried.
    """
    with log_context(user_id=user_id):
        try:
            result = asyncio.run(run_reminder_evaluation(user_id, timezone))
        except Exception as e:
            if not is_client_error(e):
                logger.error("Care reminder evaluation failed", exc_info=True, user_id=user_id)
                raise
            logger.warning("Care reminder evaluation rejected", user_id=user_id, error=str(e))
            return {"status": "rejected", "user_id": user_id, **exception_to_dict(e)}

    logger.info(
        f"Evaluated care reminders: {result['actionable']} actionable",
        user_id=user_id,
        plants_evaluated=result["plants_evaluated"],
        health_changes=result["health_changes"],
    )
    return result


@shared_task(name="app.background_jobs.tasks.care_reminders.evaluate_all_care_reminders")
def evaluate_all_care_reminders() -> Dict[str, Any]:
    """Queue a reminder evaluation for every plant owner."""
    user_ids = asyncio.run(get_plant_repository().list_user_ids())
    for user_id in user_ids:
        evaluate_care_reminders.delay(user_id)

    logger.info(f"Queued care reminder evaluation for {len(user_ids)} users")
    return {"status": "queued", "users": len(user_ids)}
