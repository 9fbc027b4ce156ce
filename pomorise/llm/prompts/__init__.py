"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes are
reviewed and versioned like code.
"""
from pomorise.llm.prompts.action_prompts import (
    build_action_prompt,
    get_action_system_prompt,
)
from pomorise.llm.prompts.insights_prompts import (
    INSIGHTS_SYSTEM_PROMPT,
    build_insights_prompt,
)

__all__ = [
    "build_action_prompt",
    "get_action_system_prompt",
    "INSIGHTS_SYSTEM_PROMPT",
    "build_insights_prompt",
]
