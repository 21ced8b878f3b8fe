"""Configuration management for the application."""
from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from pattern_catalog.config.schemas import AppConfig, LoggingConfig, LogLevel
from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    With no config file the schema defaults apply; these are the literal
    inputs of the catalogued examples. A config file is a JSON document
    matching ``AppConfig`` and is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._logger = get_logger(__name__)

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_file is None:
            return AppConfig()

        data = self._read_config_file(Path(self._config_file))
        try:
            config = AppConfig.model_validate(data)
        except ValidationError as e:
            missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration in {self._config_file}: {e.error_count()} error(s)",
                missing_fields=missing,
            ) from e

        self._logger.debug("Configuration loaded", config_file=self._config_file)
        return config

    def _read_config_file(self, path: Path) -> Dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    def override_log_level(self, level: str) -> None:
        """Replace the configured log level, e.g. from a CLI flag."""
        with self._lock:
            config = self.app_config
            logging_config = LoggingConfig(level=LogLevel(level.upper()), format=config.logging.format)
            self._app_config = config.model_copy(update={"logging": logging_config})
