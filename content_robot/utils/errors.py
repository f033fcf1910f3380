"""
Custom exceptions for the content robot.

This module defines all custom exceptions used throughout the application
for better error handling and debugging.
"""

from typing import Any, Optional


class ContentRobotException(Exception):
    """Base exception for all content robot errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Pipeline Exceptions
# =============================================================================


class PipelineError(ContentRobotException):
    """Base exception for text pipeline errors."""

    pass


class RetrievalError(PipelineError):
    """Source article could not be fetched for a search term."""

    def __init__(
        self,
        search_term: str,
        reason: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize with the search term that failed."""
        message = f"Could not retrieve content for '{search_term}': {reason}"
        super().__init__(message, {"search_term": search_term, **(details or {})})
        self.search_term = search_term


class AnalysisError(PipelineError):
    """Keyword analysis failed for a span of text."""

    pass


class PersistenceError(PipelineError):
    """Content document could not be loaded or saved."""

    def __init__(self, operation: str, path: str, reason: str) -> None:
        """Initialize with the failed operation and storage path."""
        message = f"Failed to {operation} content document at '{path}': {reason}"
        super().__init__(message, {"operation": operation, "path": path})
        self.operation = operation
        self.path = path


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(ContentRobotException):
    """Configuration error."""

    pass


class MissingConfigurationError(ConfigurationError):
    """Required configuration missing."""

    def __init__(self, config_name: str) -> None:
        """Initialize with config name."""
        message = f"Required configuration '{config_name}' is missing"
        super().__init__(message, {"config_name": config_name})
