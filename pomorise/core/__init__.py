"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error taxonomy shared by services and routes
"""
from pomorise.core.config import get_settings, Settings
from pomorise.core.logging_config import setup_logging, get_logger
from pomorise.core.exceptions import (
    PomoriseException,
    ValidationError,
    ProviderError,
    ConfigurationError,
    AuthenticationError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "PomoriseException",
    "ValidationError",
    "ProviderError",
    "ConfigurationError",
    "AuthenticationError",
]
