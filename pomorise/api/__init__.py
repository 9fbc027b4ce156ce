"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request parsing and per-endpoint response shapes
- Route definitions
- Dependency wiring of services

The runnable application lives in pomorise.api.main.
"""
from pomorise.api.app import create_app

__all__ = ["create_app"]
