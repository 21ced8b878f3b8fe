"""Example Registry - ordered registry of named examples.

Examples are registered under a human-readable label and kept in
registration order, which is the order ``run_all`` and listings use.
"""
import threading
from typing import Dict, List, Optional, TextIO

from pattern_catalog.application.examples.runner import ExampleBlock, example_of
from pattern_catalog.domain.base.exceptions import DuplicateExampleError, ExampleNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger


class ExampleRegistration:
    """Container for example registration information."""

    def __init__(self, description: str, block: ExampleBlock, pattern: str = ""):
        """
        Initialize example registration.

        Args:
            description: Label the example is run under (e.g. 'Bridge')
            block: Zero-argument callable holding the example logic
            pattern: Name of the design pattern the example demonstrates
        """
        self.description = description
        self.block = block
        self.pattern = pattern or description

    def __repr__(self) -> str:
        return f"ExampleRegistration(description='{self.description}')"


class ExampleRegistry:
    """Registry of runnable examples keyed by label."""

    def __init__(self):
        self._registrations: Dict[str, ExampleRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, description: str, block: ExampleBlock, pattern: str = "") -> None:
        """
        Register an example.

        Raises:
            DuplicateExampleError: If the label is already registered
        """
        with self._registry_lock:
            if description in self._registrations:
                raise DuplicateExampleError(description)
            self._registrations[description] = ExampleRegistration(description, block, pattern)
        self.logger.debug("Registered example", example=description)

    def example(self, description: str, pattern: str = ""):
        """Decorator form of ``register``."""
        def decorator(block: ExampleBlock) -> ExampleBlock:
            self.register(description, block, pattern)
            return block
        return decorator

    def get_registration(self, description: str) -> ExampleRegistration:
        """
        Raises:
            ExampleNotFoundError: If the label is unknown
        """
        registration = self._registrations.get(description)
        if registration is None:
            raise ExampleNotFoundError(description)
        return registration

    def is_registered(self, description: str) -> bool:
        return description in self._registrations

    def get_registered_examples(self) -> List[str]:
        return list(self._registrations)

    def get_registrations(self) -> List[ExampleRegistration]:
        return list(self._registrations.values())

    def run(self, description: str, stream: Optional[TextIO] = None) -> None:
        """Run one example by label."""
        registration = self.get_registration(description)
        example_of(registration.description, registration.block, stream)

    def run_all(self, stream: Optional[TextIO] = None) -> int:
        """Run every example in registration order; returns how many ran."""
        registrations = self.get_registrations()
        for registration in registrations:
            example_of(registration.description, registration.block, stream)
        return len(registrations)

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registry_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, description: object) -> bool:
        return description in self._registrations
