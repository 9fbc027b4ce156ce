"""
Action Service - Turns free-form user text into one structured action.

Flow:
1. Reject blank text
2. Build the extraction prompt (with optional context)
3. Call the action model once, in JSON mode
4. Validate the answer against the action schema
"""
from typing import Optional, Union

from pomorise.core.exceptions import ProviderError, ValidationError
from pomorise.core.logging_config import get_logger, truncate
from pomorise.core.validators import validate_text
from pomorise.llm.client import LLMClient, LLMError
from pomorise.llm.prompts.action_prompts import build_action_prompt, get_action_system_prompt
from pomorise.models.actions import (
    ActionSchemaError,
    ContextData,
    HabitAction,
    JournalAction,
    TaskAction,
    validate_action,
)

logger = get_logger(__name__)


class ActionClassifier:
    """
    Classifies a user sentence into a habits, journal or tasks action.

    Example:
        >>> classifier = ActionClassifier(llm_client)
        >>> action = classifier.classify("I finished the report")
        >>> action.type, action.action
        ('tasks', 'complete')
    """

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client
        self.system_prompt = get_action_system_prompt()
        logger.info("ActionClassifier initialized")

    def classify(
        self,
        text: str,
        context: Optional[ContextData] = None
    ) -> Union[HabitAction, JournalAction, TaskAction]:
        """
        Classify user text into a validated action.

        Args:
            text: The user's sentence
            context: Optional existing items the action may reference

        Returns:
            The validated action

        Raises:
            ValidationError: If text is empty or whitespace only
            ProviderError: If the model fails or returns an invalid action
        """
        is_valid, text, error = validate_text(text)
        if not is_valid:
            raise ValidationError(error, field="text")

        logger.info(
            f"Classifying action: text={truncate(text)!r}, "
            f"context={'yes' if context is not None and not context.is_empty() else 'no'}"
        )

        prompt = build_action_prompt(text, context)

        try:
            payload = self.llm_client.generate_action_json(prompt, self.system_prompt)
        except LLMError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error calling action model: {e}")
            raise ProviderError(f"Action model call failed: {e}", provider="groq") from e

        # The model sometimes drops the echoed text; the user's input is authoritative
        if isinstance(payload, dict) and not payload.get("text"):
            payload["text"] = text

        try:
            action = validate_action(payload)
        except ActionSchemaError as e:
            logger.error(f"Model output failed action schema: {e} errors={e.errors}")
            raise ProviderError(f"Model output failed action schema: {e}", provider="groq") from e

        logger.info(f"Action classified: type={action.type}, action={action.action}, id={action.id}")
        return action
