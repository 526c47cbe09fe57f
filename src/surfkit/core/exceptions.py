"""
Custom exceptions for SurfKit.

All SurfKit exceptions inherit from SurfKitError for easy catching.
"""

from typing import Any


class SurfKitError(Exception):
    """Base exception for all SurfKit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(SurfKitError):
    """Raised when configuration is invalid or missing."""

    pass


class GeometryError(SurfKitError):
    """Raised when a geometry kernel call receives invalid arguments."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation
