"""Base event classes and the in-process publisher."""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.infrastructure.logging.logger import get_logger


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str = ""
    aggregate_id: str
    aggregate_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get('event_type'):
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        pass


Handler = Union[EventHandler, Callable[[DomainEvent], None]]


class EventPublisher:
    """Publishes domain events to registered handlers.

    Handlers are keyed by event class name and invoked synchronously, in
    registration order. A handler is either an ``EventHandler`` or a plain
    callable taking the event.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}
        self._logger = get_logger(__name__)

    def register(self, event_type: str, handler: Handler) -> None:
        """Register a handler for a specific event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
        self._logger.debug("Registered event handler", event_type=event_type)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all registered handlers."""
        event_type = event.__class__.__name__
        handlers = self._handlers.get(event_type, [])

        self._logger.debug("Publishing event", event_type=event_type, handlers=len(handlers))

        for handler in handlers:
            if isinstance(handler, EventHandler):
                handler.handle(event)
            else:
                handler(event)

    def publish_all(self, events: List[DomainEvent]) -> None:
        """Publish multiple events."""
        for event in events:
            self.publish(event)
