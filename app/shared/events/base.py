# 📄 File: app/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# The shared shape of every announcement the care system makes: who it is about, which plant,
# when it happened, and a unique tag so the same announcement is never handled twice.

# 🧪 Purpose (Technical Summary):
# Base domain event types for care scheduling. Events carry a dict payload plus EventMetadata
# (id, timestamp, correlation); subclasses declare REQUIRED_FIELDS checked at construction.

# 🔗 Dependencies:
# - uuid: Event unique identifiers
# - dataclasses: Metadata structure
# - json: Wire serialization for subscribers outside the process

# 🔄 Connected Modules / Calls From:
# Used by: care_management domain events, app.shared.events.publisher

import json
from abc import ABC
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple
from uuid import uuid4


@dataclass
class EventMetadata:
    """Envelope data shared by every event, independent of its payload."""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = "1.0"
    source: str = "plant-care-api"
    correlation_id: Optional[str] = None
    user_id: Optional[str] = None
    category: str = "general"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


class DomainEvent(ABC):
    """
    Base class for care domain events.

    Subclasses list the payload keys they cannot do without in
    ``REQUIRED_FIELDS``; construction fails with ``ValueError`` when one is
    missing. Extra keyword arguments update matching metadata fields.
    """

    CATEGORY: ClassVar[str] = "general"
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        metadata: Optional[EventMetadata] = None,
        **kwargs
    ):
        if not event_type:
            raise ValueError("Event type is required")

        self.event_type = event_type
        self.data = dict(data or {})
        self.metadata = metadata or EventMetadata(category=self.CATEGORY)

        for key, value in kwargs.items():
            if not hasattr(self.metadata, key):
                raise TypeError(f"Unknown event metadata field: {key}")
            setattr(self.metadata, key, value)

        missing = [name for name in self.REQUIRED_FIELDS if self.data.get(name) is None]
        if missing:
            raise ValueError(f"{type(self).__name__} is missing {', '.join(missing)}")

    @property
    def event_id(self) -> str:
        return self.metadata.event_id

    @property
    def user_id(self) -> str:
        return self.data['user_id']

    def set_correlation_id(self, correlation_id: str) -> None:
        self.metadata.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event_type': self.event_type,
            'data': self.data,
            'metadata': self.metadata.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type='{self.event_type}', id='{self.event_id}')"


class UserEvent(DomainEvent):
    """Event scoped to one plant owner."""

    CATEGORY = "user"
    REQUIRED_FIELDS = ('user_id',)

    def __init__(self, event_type: str, user_id: str, data: Optional[Dict[str, Any]] = None, **kwargs):
        kwargs.setdefault('user_id', user_id)
        super().__init__(event_type, {**(data or {}), 'user_id': user_id}, **kwargs)


class PlantEvent(UserEvent):
    """Event scoped to one plant instance of one owner."""

    REQUIRED_FIELDS = ('user_id', 'plant_id')

    def __init__(
        self,
        event_type: str,
        plant_id: str,
        user_id: str,
        data: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        super().__init__(event_type, user_id, {**(data or {}), 'plant_id': plant_id}, **kwargs)

    @property
    def plant_id(self) -> str:
        return self.data['plant_id']


class CareEvent(PlantEvent):
    """A care activity (watering, fertilizing, ...) happened to a plant."""

    CATEGORY = "care"
    REQUIRED_FIELDS = ('user_id', 'plant_id', 'care_type')

    def __init__(self, event_type: str, plant_id: str, user_id: str, care_type: str, data=None, **kwargs):
        super().__init__(event_type, plant_id, user_id, {**(data or {}), 'care_type': care_type}, **kwargs)

    @property
    def care_type(self) -> str:
        return self.data['care_type']


class HealthEvent(PlantEvent):
    """A plant's health status was (re)assessed."""

    CATEGORY = "health"
    REQUIRED_FIELDS = ('user_id', 'plant_id', 'health_status')

    def __init__(self, event_type: str, plant_id: str, user_id: str, health_status: str, data=None, **kwargs):
        super().__init__(event_type, plant_id, user_id, {**(data or {}), 'health_status': health_status}, **kwargs)

    @property
    def health_status(self) -> str:
        return self.data['health_status']
