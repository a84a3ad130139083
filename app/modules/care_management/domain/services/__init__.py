# 📄 File: app/modules/care_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant care "brains": turning frequencies into days, working out due dates, recording care, grading health and listing reminders
# 🧪 Purpose (Technical Summary):
# Package initialization for the pure care scheduling services
# 🔗 Dependencies:
# Domain models, app.shared.utils.clock, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Application handlers, background reminder job

"""
Care Management Domain Services

All services are pure functions of their explicit inputs (instance state,
care history, current time, timezone); none read the clock or storage.

- frequency_resolver: CareFrequency -> interval days
- due_date_calculator: next due instant for one reminder
- care_log_processor: apply a care log entry to a plant instance
- health_evaluator: rule-based health status
- reminder_scheduler: ordered due/overdue/upcoming reminders for a set of plants
"""

from .frequency_resolver import resolve_interval_days, validate_reminder_config
from .due_date_calculator import advance_to_weekday, compute_next_due
from .reminder_scheduler import ReminderScheduler, classify_due, days_overdue, list_reminders
from .health_evaluator import evaluate_health
from .care_log_processor import CareLogResult, apply_care_log, next_due_dates

__all__ = [
    "resolve_interval_days",
    "validate_reminder_config",
    "advance_to_weekday",
    "compute_next_due",
    "ReminderScheduler",
    "classify_due",
    "days_overdue",
    "list_reminders",
    "evaluate_health",
    "CareLogResult",
    "apply_care_log",
    "next_due_dates",
]
