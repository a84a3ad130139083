# 📄 File: app/shared/events/publisher.py

# 🧭 Purpose (Layman Explanation):
# The "town crier" of the app: when something happens (a plant got watered, a plant's health
# dropped, reminders came due) it tells every part of the app that asked to hear about it.

# 🧪 Purpose (Technical Summary):
# In-process domain event publisher with type-based subscriptions, wildcard handlers,
# bounded publish history and failure isolation between handlers and publishers.

# 🔗 Dependencies:
# - app.shared.events.base (DomainEvent)
# - app.shared.utils.logging (structured logging)

# 🔄 Connected Modules / Calls From:
# care_management command/query handlers, background reminder jobs,
# notification dispatch collaborators (subscribers)

import inspect
from collections import defaultdict, deque
from functools import lru_cache
from typing import Any, Awaitable, Callable, Deque, Dict, List, Optional, Union

from app.shared.events.base import DomainEvent
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]

WILDCARD = "*"


class EventPublisher:
    """
    Event publisher delivering domain events to subscribed handlers.

    Handlers may be plain callables or coroutine functions. A failing handler
    is logged and counted; it never fails the publisher's caller, since the
    state change that produced the event has already happened.
    """

    def __init__(self, max_history: int = 1000):
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._history: Deque[DomainEvent] = deque(maxlen=max_history)

        # Statistics
        self.published_count = 0
        self.failed_count = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event type (``"*"`` for every event)."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(f"Subscribed handler to {event_type}", handler=getattr(handler, '__name__', repr(handler)))

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """Remove a handler subscription if present."""
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)

    async def publish(self, event: DomainEvent, correlation_id: Optional[str] = None) -> str:
        """
        Publish a domain event.

        Args:
            event: Domain event to publish
            correlation_id: Correlation ID for tracing (optional)

        Returns:
            Event ID for tracking
        """
        if correlation_id:
            event.set_correlation_id(correlation_id)

        self._history.append(event)
        self.published_count += 1

        handlers = list(self._handlers.get(event.event_type, [])) + list(self._handlers.get(WILDCARD, []))
        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self.failed_count += 1
                logger.error(
                    f"Event handler failed for {event.event_type}: {e}",
                    extra={
                        'event_id': event.event_id,
                        'event_type': event.event_type,
                        'handler': getattr(handler, '__name__', repr(handler)),
                    },
                    exc_info=True
                )

        logger.debug(
            f"Published event {event.event_id} ({event.event_type})",
            extra={'handler_count': len(handlers)}
        )
        return event.event_id

    async def publish_all(self, events: List[DomainEvent], correlation_id: Optional[str] = None) -> List[str]:
        """Publish several events in order."""
        return [await self.publish(event, correlation_id=correlation_id) for event in events]

    def published_events(self, event_type: Optional[str] = None) -> List[DomainEvent]:
        """Return recently published events, optionally filtered by type."""
        if event_type is None:
            return list(self._history)
        return [event for event in self._history if event.event_type == event_type]

    def get_publisher_metrics(self) -> Dict[str, Any]:
        """Get publisher statistics."""
        return {
            'published_count': self.published_count,
            'failed_count': self.failed_count,
            'subscriptions': {event_type: len(handlers) for event_type, handlers in self._handlers.items()},
            'history_size': len(self._history),
        }


@lru_cache()
def get_event_publisher() -> EventPublisher:
    """Get the process-wide event publisher."""
    return EventPublisher()
