"""
Action schema - the structured instructions extracted from user text.

An Action is a tagged union on the "type" field. Each variant carries the
common fields (text, type, optional id) plus its own optional fields.
The same schema is handed to the model as an output constraint and is used
afterwards to validate whatever the model returned.
"""
import json
from typing import Any, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Annotated


class BaseAction(BaseModel):
    """Fields shared by every action variant."""
    text: str = Field(..., min_length=1, description="The text content for the action")
    id: Optional[str] = Field(
        default=None,
        min_length=1,
        description="ID of the item for update/delete/complete actions"
    )


class HabitAction(BaseAction):
    type: Literal["habits"] = Field(..., description="The type of action to perform")
    action: Literal["add", "update", "delete", "complete", "reset"]
    name: Optional[str] = Field(default=None, min_length=1, description="Name of the habit")
    description: Optional[str] = Field(
        default=None, min_length=1, description="Description of the habit"
    )
    isPositive: Optional[bool] = Field(default=None, description="Whether it's a positive habit")
    targetDays: Optional[int] = Field(
        default=None, ge=1, le=365, description="Target days for the habit"
    )


class JournalAction(BaseAction):
    type: Literal["journal"] = Field(..., description="The type of action to perform")
    action: Literal["add", "update", "delete", "archive"]
    title: Optional[str] = Field(
        default=None, min_length=1, description="Title of the journal entry"
    )
    content: Optional[str] = Field(
        default=None, min_length=1, description="Content of the journal entry"
    )


class TaskAction(BaseAction):
    type: Literal["tasks"] = Field(..., description="The type of action to perform")
    action: Literal["add", "update", "delete", "complete", "clear"]
    title: Optional[str] = Field(default=None, min_length=1, description="Title of the task")
    estimatedPomodoros: Optional[int] = Field(
        default=None, ge=1, le=10, description="Estimated pomodoros"
    )
    notes: Optional[str] = Field(default=None, min_length=1, description="Notes for the task")


Action = Annotated[
    Union[HabitAction, JournalAction, TaskAction],
    Field(discriminator="type"),
]

ACTION_TYPES = ("habits", "journal", "tasks")

# Valid (type, action) combinations, derived from the variant models
VALID_ACTION_PAIRS = {
    "habits": get_args(HabitAction.model_fields["action"].annotation),
    "journal": get_args(JournalAction.model_fields["action"].annotation),
    "tasks": get_args(TaskAction.model_fields["action"].annotation),
}

_action_adapter: TypeAdapter = TypeAdapter(Action)


class ActionSchemaError(ValueError):
    """Raised when a value does not match any action variant."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


def validate_action(payload: Any) -> Union[HabitAction, JournalAction, TaskAction]:
    """
    Validate an arbitrary JSON value against the action union.

    Args:
        payload: A decoded JSON object, or a JSON string

    Returns:
        The matching action variant

    Raises:
        ActionSchemaError: If the value matches none of the variants
    """
    try:
        if isinstance(payload, (str, bytes)):
            return _action_adapter.validate_json(payload)
        return _action_adapter.validate_python(payload)
    except PydanticValidationError as e:
        raise ActionSchemaError(
            f"Action failed schema validation with {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e


def dump_action(action: Union[HabitAction, JournalAction, TaskAction]) -> Dict[str, Any]:
    """Serialize an action for the wire, omitting unset optional fields."""
    return action.model_dump(mode="json", exclude_none=True)


def action_json_schema() -> Dict[str, Any]:
    """JSON Schema of the action union, as supplied to the model."""
    return _action_adapter.json_schema()


def action_json_schema_text() -> str:
    return json.dumps(action_json_schema(), indent=2, sort_keys=True)


class _ContextItem(BaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _numeric_id_as_str(cls, value: Any) -> Any:
        # clients may send database ids as numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ContextTask(_ContextItem):
    title: str


class ContextHabit(_ContextItem):
    name: str


class ContextJournal(_ContextItem):
    title: str


class ContextData(BaseModel):
    """
    Read-only snapshot of existing entities sent by the client.

    Only used to let the model pick the right id for update, delete and
    complete actions.
    """
    tasks: List[ContextTask] = Field(default_factory=list)
    habits: List[ContextHabit] = Field(default_factory=list)
    journals: List[ContextJournal] = Field(default_factory=list)

    @field_validator("tasks", "habits", "journals", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def is_empty(self) -> bool:
        return not (self.tasks or self.habits or self.journals)
