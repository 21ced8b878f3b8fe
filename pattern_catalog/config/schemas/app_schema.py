"""Main application configuration schema."""
from pydantic import BaseModel, Field

from .examples_schema import ExamplesConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    examples: ExamplesConfig = Field(default_factory=ExamplesConfig)
