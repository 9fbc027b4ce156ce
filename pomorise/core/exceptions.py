"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Routes translate them into the per-endpoint response shapes
- Provider details are only exposed in development mode
"""
from typing import Any, Optional


class PomoriseException(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(PomoriseException):
    """Raised when caller input is missing or malformed."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Any] = None):
        if details is None and field:
            details = f"field={field}"
        super().__init__(message, details=details)
        self.field = field


class ProviderError(PomoriseException):
    """
    Raised when a downstream provider (model, transcription, identity)
    cannot be reached or returns unusable output.
    """
    status_code = 500
    error_code = "provider_error"

    def __init__(self, message: str = "Provider unavailable", provider: Optional[str] = None):
        super().__init__(message, details=f"provider={provider}" if provider else None)
        self.provider = provider


class ConfigurationError(PomoriseException):
    """Raised at startup when a required credential is absent."""
    status_code = 500
    error_code = "configuration_error"

    def __init__(self, message: str):
        super().__init__(message)


class AuthenticationError(PomoriseException):
    """Raised when a bearer token is missing or rejected."""
    status_code = 401
    error_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
