"""
Models module - Pydantic schemas for data validation.

This module defines:
- Action models: the tagged union extracted from user text
- Insights models: habit/task records and the generated summary
- API models: request/response contracts for the HTTP layer
"""
from pomorise.models.actions import (
    Action,
    ActionSchemaError,
    ContextData,
    HabitAction,
    JournalAction,
    TaskAction,
    dump_action,
    validate_action,
)
from pomorise.models.insights import (
    HabitRecord,
    InsightsRequest,
    InsightsResponse,
    InsightsResult,
    TaskRecord,
)
from pomorise.models.api import (
    ActionRequest,
    ActionResponse,
    ErrorResponse,
    HealthResponse,
    SpeechResponse,
)

__all__ = [
    "Action",
    "ActionSchemaError",
    "ContextData",
    "HabitAction",
    "JournalAction",
    "TaskAction",
    "dump_action",
    "validate_action",
    "HabitRecord",
    "InsightsRequest",
    "InsightsResponse",
    "InsightsResult",
    "TaskRecord",
    "ActionRequest",
    "ActionResponse",
    "ErrorResponse",
    "HealthResponse",
    "SpeechResponse",
]
