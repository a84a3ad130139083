# 📄 File: app/modules/care_management/domain/services/reminder_scheduler.py
# 🧭 Purpose (Layman Explanation):
# Builds the owner's to-do list of plant chores: what is late, what is due now, and what is coming up in the next couple of days
# 🧪 Purpose (Technical Summary):
# Pure, idempotent derivation of ordered DueState records for a set of plant instances at an instant, plus the shared due-date classification
# 🔗 Dependencies:
# due_date_calculator.py, due_state.py, plant_instance.py, app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# health_evaluator.py, list_reminders query handler, background reminder job

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Iterator, List, Optional

from app.modules.care_management.domain.models.due_state import DueState, DueStatus, ReminderWindow
from app.modules.care_management.domain.models.plant_instance import PlantInstance
from app.modules.care_management.domain.services.due_date_calculator import compute_next_due
from app.shared.utils.clock import TimezoneLike, ensure_aware, resolve_timezone

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def classify_due(due_at: datetime, now: datetime, window: Optional[ReminderWindow] = None) -> Optional[DueStatus]:
    """
    Classify a due instant relative to now.

    Returns None when the due date is further away than the lookahead.
    """
    window = window or ReminderWindow()
    due_at = ensure_aware(due_at)
    now = ensure_aware(now)

    if now < due_at - window.lookahead:
        return None
    if now < due_at:
        return DueStatus.UPCOMING
    if now < due_at + window.grace_period:
        return DueStatus.DUE
    return DueStatus.OVERDUE


def days_overdue(due_at: datetime, now: datetime) -> int:
    """Whole days elapsed since the due instant (floor), never negative."""
    elapsed = ensure_aware(now) - ensure_aware(due_at)
    return max(elapsed // ONE_DAY, 0)


class ReminderScheduler:
    """
    Derives the reminders a user should see at a given instant.

    Output is a pure function of (plants, now, timezone, window): asking
    twice with the same inputs yields the same sequence.
    """

    def __init__(self, window: Optional[ReminderWindow] = None):
        self.window = window or ReminderWindow()

    def due_states_for(self, plant: PlantInstance, now: datetime, tz: tzinfo) -> List[DueState]:
        """Unordered due states for one plant's enabled reminders."""
        states = []
        for activity, config in plant.enabled_reminders():
            due_at = compute_next_due(plant.last_performed_at(activity), plant.acquired_at, config, now, tz)
            if due_at is None:
                continue

            status = classify_due(due_at, now, self.window)
            if status is None:
                continue

            states.append(DueState(
                plant_instance_id=plant.id,
                user_id=plant.user_id,
                activity_type=activity,
                due_at=due_at,
                status=status,
                days_overdue=days_overdue(due_at, now) if status == DueStatus.OVERDUE else 0,
                notification_method=config.notification_method,
            ))
        return states

    def iter_reminders(
        self,
        plants: Iterable[PlantInstance],
        now: datetime,
        tz: Optional[TimezoneLike] = "UTC",
    ) -> Iterator[DueState]:
        """
        Yield reminders ordered overdue first (most overdue first), then due
        (earliest first), then upcoming (soonest first); ties broken by plant
        instance id then activity type.
        """
        tzinfo = resolve_timezone(tz)
        now = ensure_aware(now)

        states: List[DueState] = []
        for plant in plants:
            states.extend(self.due_states_for(plant, now, tzinfo))

        states.sort(key=lambda state: state.sort_key)
        logger.debug("Derived reminders", extra={"reminder_count": len(states)})
        yield from states

    def list_reminders(
        self,
        plants: Iterable[PlantInstance],
        now: datetime,
        tz: Optional[TimezoneLike] = "UTC",
    ) -> List[DueState]:
        return list(self.iter_reminders(plants, now, tz))


def list_reminders(
    plants: Iterable[PlantInstance],
    now: datetime,
    tz: Optional[TimezoneLike] = "UTC",
    window: Optional[ReminderWindow] = None,
) -> List[DueState]:
    """Convenience wrapper around ReminderScheduler.list_reminders."""
    return ReminderScheduler(window).list_reminders(plants, now, tz)
