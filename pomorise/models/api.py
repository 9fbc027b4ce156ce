"""
Request and Response models for the HTTP API.

These Pydantic models define the contract between the app and the server.
They provide:
- Type validation
- Automatic documentation
- Request/response serialization
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, EmailStr, Field

from pomorise.models.actions import ContextData, HabitAction, JournalAction, TaskAction


class ActionRequest(BaseModel):
    """
    Request model for the /api/action endpoint.

    Attributes:
        text: Free-form user sentence to turn into an action.
        context: Optional list of existing tasks/habits/journals.
    """
    text: str = Field(
        ...,
        description="The user's instruction in plain language",
        examples=["I finished the report"]
    )
    context: Optional[ContextData] = Field(
        default=None,
        description="Existing items the action may refer to"
    )


class ActionResponse(BaseModel):
    success: bool = True
    data: Union[HabitAction, JournalAction, TaskAction]


class FailureResponse(BaseModel):
    """Error shape of the action and speech endpoints."""
    success: bool = False
    error: str
    details: Optional[Any] = None


class InsightsErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None


class SpeechResponse(BaseModel):
    success: bool = True
    text: str
    processingTime: int = Field(..., description="Milliseconds spent on the request")


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1)


class AuthTokenResponse(BaseModel):
    token: str
    user: Dict[str, Any]


class AuthUserResponse(BaseModel):
    user: Optional[Dict[str, Any]]


class MessageResponse(BaseModel):
    message: str


class AuthErrorResponse(BaseModel):
    error: Union[str, List[Dict[str, Any]]]


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="Good")


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    message: str
    details: Optional[Any] = None
