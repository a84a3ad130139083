# 📄 File: app/modules/care_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant care module: keeps track of when each plant needs watering or feeding, records care, and grades plant health
# 🧪 Purpose (Technical Summary):
# Care-reminder scheduling engine implemented as a DDD module with CQRS application layer
# 🔗 Dependencies:
# FastAPI, pydantic, app.shared.core, app.shared.events, app.shared.utils
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router, app.background_jobs

"""
Care Management Module

- Frequency Resolver: care frequency -> interval days
- Due-Date Calculator: next due instant per reminder, in the owner's timezone
- Care Log Processor: validates and applies care log entries
- Health Evaluator: rule-based plant health status
- Reminder Scheduler: ordered overdue / due / upcoming reminders per user

Architecture follows Domain-Driven Design:
- Domain: Pure care logic, entities, repository interfaces, events
- Application: Commands, queries, handlers, DTOs
- Infrastructure: Repository implementations
- Presentation: API endpoints and request/response schemas

The engine decides when care is due; notification delivery is left to
subscribers of the CareRemindersDue event.
"""

__version__ = "1.0.0"
