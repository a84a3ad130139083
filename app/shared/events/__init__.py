# 📄 File: app/shared/events/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up an event system that lets different parts of the app communicate with each other,
# like announcing when a plant is watered or when a plant's care reminders come due.

# 🧪 Purpose (Technical Summary):
# Initializes the domain events system for decoupled communication between modules using
# the publisher-subscriber pattern with async handler support.

# 🔗 Dependencies:
# - base: Base event classes and interfaces
# - publisher: Event publishing and distribution

# 🔄 Connected Modules / Calls From:
# Used by: care_management for publishing care, health and reminder events,
# Background jobs for reminder hand-off

from app.shared.events.base import (
    CareEvent,
    DomainEvent,
    EventMetadata,
    HealthEvent,
    PlantEvent,
    UserEvent,
)
from app.shared.events.publisher import EventPublisher, get_event_publisher

__all__ = [
    "CareEvent",
    "DomainEvent",
    "EventMetadata",
    "HealthEvent",
    "PlantEvent",
    "UserEvent",
    "EventPublisher",
    "get_event_publisher",
]
