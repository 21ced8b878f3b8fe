"""Named examples: registry, runner and the built-in catalogue."""

from .catalog import create_catalog, register_catalog
from .registry import ExampleRegistration, ExampleRegistry
from .runner import example_of

__all__ = [
    "ExampleRegistration",
    "ExampleRegistry",
    "create_catalog",
    "example_of",
    "register_catalog",
]
