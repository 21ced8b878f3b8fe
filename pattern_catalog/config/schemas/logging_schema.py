"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log rendering format."""
    CONSOLE = "console"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(use_enum_values=False)

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    format: LogFormat = Field(LogFormat.CONSOLE, description="Log renderer")
