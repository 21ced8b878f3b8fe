"""Configuration package.

Only the schemas are re-exported here; ``ConfigurationManager`` lives in
``pattern_catalog.config.manager`` so that the logging module can import the
schemas without pulling in the domain layer.
"""

from .schemas import AppConfig, ExamplesConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "ExamplesConfig",
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
]
