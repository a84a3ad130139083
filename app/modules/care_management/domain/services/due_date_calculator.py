# 📄 File: app/modules/care_management/domain/services/due_date_calculator.py
# 🧭 Purpose (Layman Explanation):
# Works out the next day (and time) a plant needs watering or feeding, counting days on the owner's own calendar
# 🧪 Purpose (Technical Summary):
# Pure next-due computation: anchor (last performed or acquisition) -> civil date in the target timezone -> + interval days -> forward to weekday -> time of day
# 🔗 Dependencies:
# datetime, frequency_resolver.py, app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# care_log_processor.py, health_evaluator.py, reminder_scheduler.py

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from app.modules.care_management.domain.models.reminder import ReminderConfig
from app.modules.care_management.domain.services.frequency_resolver import validate_reminder_config
from app.shared.utils.clock import TimezoneLike, ensure_aware, resolve_timezone

logger = logging.getLogger(__name__)


def advance_to_weekday(day: date, day_of_week: int) -> date:
    """
    Move forward (never backward) to the given weekday, 0 = Sunday.
    A date already on that weekday is returned unchanged.
    """
    sunday_based = (day.weekday() + 1) % 7
    return day + timedelta(days=(day_of_week - sunday_based) % 7)


def compute_next_due(
    last_done_at: Optional[datetime],
    acquired_at: datetime,
    config: ReminderConfig,
    now: Optional[datetime] = None,
    tz: Optional[TimezoneLike] = "UTC",
) -> Optional[datetime]:
    """
    Compute the next due instant for one reminder.

    Args:
        last_done_at: When the activity was last performed (None if never)
        acquired_at: When the plant was acquired, the anchor for a first due date
        config: Reminder configuration for the activity
        now: Evaluation instant; accepted for symmetry with the other services,
            the result depends only on the anchor and the configuration
        tz: Owner's timezone as a tzinfo or IANA name

    Returns:
        Aware datetime in the target timezone, or None when the reminder is
        disabled or AS_NEEDED

    Raises:
        InvalidConfigError: Malformed configuration or unknown timezone
    """
    interval_days = validate_reminder_config(config)
    tzinfo = resolve_timezone(tz)

    if not config.enabled or interval_days is None:
        return None

    anchor = ensure_aware(last_done_at or acquired_at).astimezone(tzinfo)
    due_date = anchor.date() + timedelta(days=interval_days)

    if config.day_of_week is not None:
        due_date = advance_to_weekday(due_date, config.day_of_week)

    due_at = datetime.combine(due_date, config.reminder_time, tzinfo=tzinfo)
    logger.debug(
        "Computed next due date",
        extra={"anchor": anchor.isoformat(), "interval_days": interval_days, "due_at": due_at.isoformat()},
    )
    return due_at
