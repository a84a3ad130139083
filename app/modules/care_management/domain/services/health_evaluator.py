# 📄 File: app/modules/care_management/domain/services/health_evaluator.py
# 🧭 Purpose (Layman Explanation):
# Gives each plant a health grade from excellent to critical based on missed waterings/feedings and whether a recent check-up found a problem
# 🧪 Purpose (Technical Summary):
# Rule-based, total health derivation recomputed from (instance, care history, now); never raises, invalid inputs degrade to no-ops
# 🔗 Dependencies:
# due_date_calculator.py, frequency_resolver.py, reminder_scheduler.py (classify_due), app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# care_log_processor.py, get_plant_health query handler, background reminder job

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from app.modules.care_management.domain.models.care_log import CareLogEntry
from app.modules.care_management.domain.models.due_state import DueStatus, ReminderWindow
from app.modules.care_management.domain.models.plant_instance import HealthStatus, PlantInstance
from app.modules.care_management.domain.services.due_date_calculator import compute_next_due
from app.modules.care_management.domain.services.frequency_resolver import validate_reminder_config
from app.modules.care_management.domain.services.reminder_scheduler import classify_due
from app.shared.core.exceptions import InvalidConfigError
from app.shared.utils.clock import TimezoneLike, ensure_aware, resolve_timezone

logger = logging.getLogger(__name__)

DEFAULT_PROBLEM_WINDOW = timedelta(days=14)


def _latest_condition_report(
    history: List[CareLogEntry],
    now: datetime,
    problem_window: timedelta,
) -> Optional[CareLogEntry]:
    """Most recent inspection/treatment log inside [now - window, now]."""
    since = now - problem_window
    reports = [
        entry for entry in history
        if entry.activity_type.reports_condition and since <= entry.performed_at <= now
    ]
    if not reports:
        return None
    return max(reports, key=lambda entry: (entry.performed_at, entry.created_at))


def evaluate_health(
    instance: PlantInstance,
    care_history: Iterable[CareLogEntry],
    now: datetime,
    tz: Optional[TimezoneLike] = "UTC",
    window: Optional[ReminderWindow] = None,
    default_problem_window: timedelta = DEFAULT_PROBLEM_WINDOW,
) -> HealthStatus:
    """
    Derive a plant's health status.

    Rules:
    1. Start from EXCELLENT
    2. Degrade one level per enabled reminder classified OVERDUE
    3. Degrade one more level if the latest inspection / pest treatment /
       disease treatment within the problem window flagged a problem
    4. Floor at CRITICAL
    A plant with no scheduled reminders (enabled, with an interval) and no
    history is GOOD.

    The problem window is the shortest interval among the enabled reminders,
    or default_problem_window when none resolves to an interval.
    """
    now = ensure_aware(now)

    try:
        tzinfo = resolve_timezone(tz)
    except InvalidConfigError:
        logger.warning("Unknown timezone for health evaluation, using UTC", extra={"timezone": str(tz)})
        tzinfo = timezone.utc

    history = [entry for entry in care_history if entry.plant_instance_id == instance.id]

    scheduled_count = 0
    overdue_count = 0
    intervals: List[int] = []

    for activity, config in instance.enabled_reminders():
        try:
            interval_days = validate_reminder_config(config)
            due_at = compute_next_due(instance.last_performed_at(activity), instance.acquired_at, config, now, tzinfo)
        except InvalidConfigError as e:
            logger.warning(
                f"Ignoring invalid {activity.value} reminder during health evaluation: {e.message}",
                extra={"plant_instance_id": instance.id},
            )
            continue

        if interval_days is None:
            continue

        scheduled_count += 1
        intervals.append(interval_days)
        if due_at is not None and classify_due(due_at, now, window) == DueStatus.OVERDUE:
            overdue_count += 1

    if scheduled_count == 0 and not history:
        return HealthStatus.GOOD

    problem_window = timedelta(days=min(intervals)) if intervals else default_problem_window
    latest_report = _latest_condition_report(history, now, problem_window)
    problem_found = latest_report is not None and latest_report.problem_detected

    status = HealthStatus.EXCELLENT.degrade(overdue_count + (1 if problem_found else 0))
    logger.debug(
        "Evaluated plant health",
        extra={
            "plant_instance_id": instance.id,
            "overdue_reminders": overdue_count,
            "problem_found": problem_found,
            "health_status": status.value,
        },
    )
    return status
