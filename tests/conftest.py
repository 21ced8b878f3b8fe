import logging

import pytest

from pattern_catalog.application.examples import ExampleRegistry, create_catalog
from pattern_catalog.config.schemas import ExamplesConfig
from pattern_catalog.domain.organization import Directory, EmployeeFactory


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by setup_logging so captured streams don't leak."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


@pytest.fixture
def directory():
    return Directory()


@pytest.fixture
def employee_factory(directory):
    return EmployeeFactory(directory)


@pytest.fixture
def registry():
    return ExampleRegistry()


@pytest.fixture
def seeded_config():
    return ExamplesConfig(random_seed=42)


@pytest.fixture
def catalog(seeded_config):
    return create_catalog(seeded_config)
