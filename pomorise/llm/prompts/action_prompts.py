"""
Action Extraction Prompts - turn a user sentence into one structured action.

The user prompt embeds the raw input, the classification rules, one example
per action type and the caller's context. The system prompt carries the
JSON schema the answer must follow.
"""
from typing import List, Optional

from pomorise.models.actions import ContextData, action_json_schema_text


def get_action_system_prompt() -> str:
    """
    Get the system prompt for action extraction.

    Returns:
        System prompt embedding the action JSON schema
    """
    return f"""You convert short user messages from a productivity app into exactly one structured action.

The app tracks tasks (pomodoro work items), habits and journal entries.

Respond with a single JSON object that validates against this JSON Schema.
Use exactly one of the variants, selected by the "type" field.
Omit optional fields you cannot fill. Do not add fields that are not in the schema.
Always copy the user's message into the "text" field.

## JSON SCHEMA
{action_json_schema_text()}
"""


def _format_context(context: Optional[ContextData]) -> str:
    """Render the CONTEXT block, or an empty string when nothing was sent."""
    if context is None:
        return ""

    parts: List[str] = []

    if context.tasks:
        lines = "\n".join(f"- {t.title} (ID: {t.id})" for t in context.tasks)
        parts.append(f"Current Tasks:\n{lines}")

    if context.habits:
        lines = "\n".join(f"- {h.name} (ID: {h.id})" for h in context.habits)
        parts.append(f"Current Habits:\n{lines}")

    if context.journals:
        lines = "\n".join(f"- {j.title} (ID: {j.id})" for j in context.journals)
        parts.append(f"Current Journals:\n{lines}")

    if not parts:
        return ""

    joined = "\n\n".join(parts)
    return f"\n\nCONTEXT:\n{joined}"


def build_action_prompt(text: str, context: Optional[ContextData] = None) -> str:
    """
    Build the user prompt for action extraction.

    Pure string interpolation: the same inputs always give the same prompt.

    Args:
        text: The user's sentence, exactly as typed (non-blank)
        context: Optional existing tasks/habits/journals

    Returns:
        Instruction string for the model
    """
    context_block = _format_context(context)

    return f"""
USER INPUT: "{text}"

INSTRUCTIONS:
1. Determine the most appropriate action type (tasks, habits, journal)
2. For update/delete/complete actions, include the ID from context if available
3. Follow these specific rules:

TASKS:
- "add": Must include title with emoji
- "update"/"delete"/"complete": Include ID from context if matching
- "clear": Removes all completed tasks, no ID needed
- Example: {{"type":"tasks","action":"complete","text":"I finished the report","title":"Finish report","id":"123"}}

HABITS:
- "add": Must include name and a short description
- "update"/"delete"/"complete"/"reset": Include ID from context if matching
- Example: {{"type":"habits","action":"complete","text":"Went for my morning run","name":"Morning run","id":"456"}}

JOURNAL:
- "add": Should include title and content (100 words only, based on the habits and tasks)
- "update"/"delete"/"archive": Include ID from context if matching
- Example: {{"type":"journal","action":"update","text":"Update today's entry","title":"3 April, Good day","content":"New content","id":"789"}}

DEFAULT:
- When uncertain, default to tasks
- For ambiguous completions ("I did X"), use tasks with complete action
- For creation requests without clear type ("I need to X"), use tasks with add action
- For delete/update requests without clear type ("I need to X"), or that do not exist in context, use tasks with add action
{context_block}

OUTPUT FORMAT: JSON matching the schema exactly, with all required fields.

ANALYZE THIS INPUT: "{text}"
"""
