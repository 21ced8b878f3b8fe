"""Configuration schemas."""

from .app_schema import AppConfig
from .examples_schema import ExamplesConfig
from .logging_schema import LogFormat, LoggingConfig, LogLevel

__all__ = ["AppConfig", "ExamplesConfig", "LogFormat", "LoggingConfig", "LogLevel"]
