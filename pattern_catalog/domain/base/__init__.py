"""Base domain layer - shared kernel for all domain modules."""

from .entity import AggregateRoot, Entity
from .events import DomainEvent, EventHandler, EventPublisher
from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateExampleError,
    ExampleExecutionError,
    ExampleNotFoundError,
)

__all__ = [
    "AggregateRoot",
    "Entity",
    "DomainEvent",
    "EventHandler",
    "EventPublisher",
    "DomainException",
    "ConfigurationError",
    "DuplicateExampleError",
    "ExampleExecutionError",
    "ExampleNotFoundError",
]
