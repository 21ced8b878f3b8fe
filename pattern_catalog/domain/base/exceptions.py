"""Base domain exceptions."""
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR",
                         {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


class ExampleNotFoundError(DomainException):
    """Raised when an example label is not registered."""

    def __init__(self, description: str):
        super().__init__(f"Example '{description}' not found", "EXAMPLE_NOT_FOUND",
                         {"description": description})
        self.description = description


class DuplicateExampleError(DomainException):
    """Raised when an example label is registered twice."""

    def __init__(self, description: str):
        super().__init__(f"Example '{description}' is already registered",
                         "DUPLICATE_EXAMPLE", {"description": description})
        self.description = description


class ExampleExecutionError(DomainException):
    """Raised when an example block fails while running."""

    def __init__(self, description: str, cause: Exception):
        super().__init__(f"Example '{description}' failed: {cause}", "EXAMPLE_FAILED",
                         {"description": description, "cause": type(cause).__name__})
        self.description = description
        self.cause = cause
