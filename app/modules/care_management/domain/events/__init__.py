# 📄 File: app/modules/care_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the care announcements other parts of the app can listen for
# 🧪 Purpose (Technical Summary):
# Package initialization for care management domain events
# 🔗 Dependencies:
# care_events.py, app.shared.events
# 🔄 Connected Modules / Calls From:
# Application handlers, background jobs, event subscribers

from .care_events import CareActivityLogged, CareRemindersDue, PlantHealthChanged

__all__ = [
    "CareActivityLogged",
    "CareRemindersDue",
    "PlantHealthChanged",
]
