"""Application bootstrap - wires configuration, logging and the catalogue."""

from __future__ import annotations

from typing import Optional

from pattern_catalog.application.examples import ExampleRegistry, create_catalog
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """Application context: configuration, logging and the example registry."""

    def __init__(self, config_path: Optional[str] = None,
                 log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._log_level = log_level
        self._config_manager: Optional[ConfigurationManager] = None
        self._registry: Optional[ExampleRegistry] = None
        self._initialized = False

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
            if self._log_level:
                self._config_manager.override_log_level(self._log_level)
        return self._config_manager.app_config

    @property
    def registry(self) -> ExampleRegistry:
        if not self._initialized:
            self.initialize()
        return self._registry

    def initialize(self) -> bool:
        """Configure logging and build the catalogue. Safe to call twice."""
        if self._initialized:
            return True

        app_config = self.config
        setup_logging(app_config.logging)
        self._registry = create_catalog(app_config.examples)
        self._initialized = True
        self.logger.info(
            "Application initialized",
            examples=len(self._registry),
            config_path=self.config_path,
        )
        return True


def create_application(config_path: Optional[str] = None,
                       log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    app = Application(config_path, log_level)
    app.initialize()
    return app
