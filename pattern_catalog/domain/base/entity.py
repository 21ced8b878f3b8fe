"""Base domain entities - foundation for all domain objects."""
from datetime import datetime, timezone
from typing import Any, List
from abc import ABC, abstractmethod
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel, ABC):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    # Identity is what tells two same-named entities apart
    id: str = Field(default_factory=lambda: str(uuid4()))
    created_at: datetime = Field(default_factory=_utcnow)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))


class AggregateRoot(Entity):
    """Base class for aggregate roots."""

    _domain_events: List[Any] = PrivateAttr(default_factory=list)

    def add_domain_event(self, event: Any) -> None:
        """Add a domain event to be published."""
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Clear all domain events."""
        self._domain_events.clear()

    def get_domain_events(self) -> List[Any]:
        """Get all domain events."""
        return self._domain_events.copy()

    @abstractmethod
    def get_id(self) -> Any:
        """Get the aggregate root identifier."""
