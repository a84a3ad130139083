# 📄 File: app/modules/care_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core plant care rules - when chores are due, how care is recorded, and how plant health is graded
# 🧪 Purpose (Technical Summary):
# Domain layer initialization containing care entities, pure scheduling services, repository interfaces and domain events
# 🔗 Dependencies:
# Domain models, services, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer

"""
Care Management Domain Layer

Domain Models:
- PlantCatalogEntry, PlantInstance, ReminderConfig, CareLogEntry, DueState

Domain Services:
- Frequency Resolver, Due-Date Calculator, Care Log Processor,
  Health Evaluator, Reminder Scheduler

Repository Interfaces:
- PlantInstanceRepository, CareLogRepository, PlantCatalogRepository

Domain Events:
- CareActivityLogged, PlantHealthChanged, CareRemindersDue
"""
