# 📄 File: app/modules/care_management/domain/services/frequency_resolver.py
# 🧭 Purpose (Layman Explanation):
# Translates "water weekly" or "feed monthly" into a plain number of days between care sessions
# 🧪 Purpose (Technical Summary):
# Pure mapping from CareFrequency (plus optional custom interval) to an interval in whole days, and reminder configuration validation
# 🔗 Dependencies:
# reminder.py (CareFrequency, ReminderConfig), app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# due_date_calculator.py, health_evaluator.py

from typing import Dict, Optional

from app.modules.care_management.domain.models.reminder import CareFrequency, ReminderConfig
from app.shared.core.exceptions import InvalidConfigError

# MONTHLY is a fixed 30-day approximation, not a calendar month.
FIXED_INTERVAL_DAYS: Dict[CareFrequency, Optional[int]] = {
    CareFrequency.DAILY: 1,
    CareFrequency.EVERY_2_DAYS: 2,
    CareFrequency.EVERY_3_DAYS: 3,
    CareFrequency.WEEKLY: 7,
    CareFrequency.EVERY_2_WEEKS: 14,
    CareFrequency.BIWEEKLY: 14,
    CareFrequency.MONTHLY: 30,
    CareFrequency.AS_NEEDED: None,
}

_unmapped = set(CareFrequency) - set(FIXED_INTERVAL_DAYS) - {CareFrequency.CUSTOM}
if _unmapped:
    raise RuntimeError(f"Care frequencies without an interval: {sorted(f.value for f in _unmapped)}")


def resolve_interval_days(frequency: CareFrequency, custom_interval_days: Optional[int] = None) -> Optional[int]:
    """
    Resolve a care frequency to whole days between occurrences.

    Returns:
        Interval in days, or None for AS_NEEDED (never scheduled)

    Raises:
        InvalidConfigError: CUSTOM without a positive integer interval
    """
    try:
        frequency = CareFrequency(frequency)
    except ValueError:
        raise InvalidConfigError(
            message=f"Unknown care frequency: {frequency}",
            field="frequency",
            value=frequency,
        )

    if frequency == CareFrequency.CUSTOM:
        if (
            custom_interval_days is None
            or isinstance(custom_interval_days, bool)
            or not isinstance(custom_interval_days, int)
            or custom_interval_days < 1
        ):
            raise InvalidConfigError(
                message="Custom frequency requires a positive integer interval",
                field="interval_days",
                value=custom_interval_days,
            )
        return custom_interval_days

    return FIXED_INTERVAL_DAYS[frequency]


def validate_reminder_config(config: ReminderConfig) -> Optional[int]:
    """
    Validate a reminder configuration and return its resolved interval.

    Configs built through the model are already checked on construction;
    this also covers configs assembled without validation (model_construct).
    """
    config.ensure_valid()
    return resolve_interval_days(config.frequency, config.interval_days)
