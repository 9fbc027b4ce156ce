import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from pomorise.models.actions import (
    ActionSchemaError,
    ContextData,
    HabitAction,
    JournalAction,
    TaskAction,
    VALID_ACTION_PAIRS,
    action_json_schema,
    dump_action,
    validate_action,
)


def test_validate_task_action():
    action = validate_action({
        "type": "tasks",
        "action": "complete",
        "text": "I finished the report",
        "id": "123",
        "title": "Finish report",
    })
    assert isinstance(action, TaskAction)
    assert action.action == "complete"
    assert action.id == "123"


def test_validate_habit_action():
    action = validate_action({
        "type": "habits",
        "action": "add",
        "text": "Start meditating",
        "name": "Meditate",
        "isPositive": True,
        "targetDays": 21,
    })
    assert isinstance(action, HabitAction)
    assert action.targetDays == 21


def test_validate_journal_action_from_json_string():
    action = validate_action('{"type":"journal","action":"archive","text":"archive it","id":"789"}')
    assert isinstance(action, JournalAction)
    assert action.action == "archive"


@pytest.mark.parametrize("payload", [
    {"type": "pomodoros", "action": "add", "text": "x"},
    {"type": "tasks", "action": "archive", "text": "x"},
    {"type": "journal", "action": "complete", "text": "x"},
    {"type": "habits", "action": "clear", "text": "x"},
    {"type": "tasks", "action": "add", "text": ""},
    {"type": "tasks", "action": "add"},
    {"action": "add", "text": "x"},
    {"type": "tasks", "action": "add", "text": "x", "id": ""},
    {"type": "tasks", "action": "add", "text": "x", "estimatedPomodoros": 11},
    {"type": "tasks", "action": "add", "text": "x", "estimatedPomodoros": 0},
    {"type": "habits", "action": "add", "text": "x", "targetDays": 366},
    {"type": "habits", "action": "add", "text": "x", "name": ""},
    ["not", "an", "object"],
    None,
])
def test_validate_action_rejects_invalid(payload):
    with pytest.raises(ActionSchemaError) as exc_info:
        validate_action(payload)
    assert exc_info.value.errors


def test_fields_of_other_variants_are_not_required():
    action = validate_action({"type": "tasks", "action": "clear", "text": "clear done tasks"})
    assert dump_action(action) == {"type": "tasks", "action": "clear", "text": "clear done tasks"}


def test_unknown_fields_are_dropped():
    action = validate_action({
        "type": "journal", "action": "add", "text": "note", "mood": "happy", "estimatedPomodoros": 3,
    })
    assert "mood" not in dump_action(action)
    assert "estimatedPomodoros" not in dump_action(action)


def test_validation_survives_json_round_trip():
    original = validate_action({
        "type": "habits",
        "action": "update",
        "text": "Make my run 10 minutes",
        "id": "456",
        "description": "Run for 10 minutes",
    })
    reparsed = validate_action(json.loads(json.dumps(dump_action(original))))
    assert reparsed == original
    assert dump_action(reparsed) == dump_action(original)


def test_valid_action_pairs():
    assert set(VALID_ACTION_PAIRS) == {"habits", "journal", "tasks"}
    assert set(VALID_ACTION_PAIRS["habits"]) == {"add", "update", "delete", "complete", "reset"}
    assert set(VALID_ACTION_PAIRS["journal"]) == {"add", "update", "delete", "archive"}
    assert set(VALID_ACTION_PAIRS["tasks"]) == {"add", "update", "delete", "complete", "clear"}


def test_json_schema_uses_type_discriminator():
    schema = action_json_schema()
    assert schema["discriminator"]["propertyName"] == "type"
    assert len(schema["oneOf"]) == 3


def test_context_data_treats_null_lists_as_empty():
    context = ContextData.model_validate({"tasks": None, "habits": [{"id": "1", "name": "Run"}]})
    assert context.tasks == []
    assert context.habits[0].name == "Run"
    assert not context.is_empty()
    assert ContextData().is_empty()


def test_context_accepts_numeric_ids():
    context = ContextData.model_validate({
        "tasks": [{"id": 123, "title": "Finish report"}],
        "journals": [{"id": "j1", "title": "Day one"}],
    })
    assert context.tasks[0].id == "123"
    assert context.journals[0].id == "j1"


def test_context_rejects_boolean_ids():
    with pytest.raises(PydanticValidationError):
        ContextData.model_validate({"habits": [{"id": True, "name": "Run"}]})
