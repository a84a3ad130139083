# 📄 File: app/background_jobs/tasks/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the background chores the app knows how to run
# 🧪 Purpose (Technical Summary):
# Task package for Celery autodiscovery
# 🔗 Dependencies:
# care_reminders.py
# 🔄 Connected Modules / Calls From:
# celery_config.py (autodiscover_tasks, beat_schedule)

from .care_reminders import evaluate_all_care_reminders, evaluate_care_reminders

__all__ = ["evaluate_all_care_reminders", "evaluate_care_reminders"]
