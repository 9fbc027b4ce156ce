"""
Pomorise API - AI backend for a habits, tasks and journal productivity app.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, and cross-cutting utilities
- services/  : Business logic and orchestration
- llm/       : LLM integration and prompt management
- models/    : Pydantic models for request/response schemas
"""

__version__ = "1.0.0"
