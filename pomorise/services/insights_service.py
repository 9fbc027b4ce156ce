"""
Insights Service - Motivational summaries from habit and task data.

When the user has no habits and no tasks a fixed fallback is returned
without calling the model. Otherwise one Gemini call produces the
story, tips, feedback and areas to improve.
"""
from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from pomorise.core.exceptions import ProviderError
from pomorise.core.logging_config import get_logger
from pomorise.llm.client import LLMClient, LLMError
from pomorise.llm.prompts.insights_prompts import INSIGHTS_SYSTEM_PROMPT, build_insights_prompt
from pomorise.models.insights import HabitRecord, InsightsResponse, InsightsResult, TaskRecord

logger = get_logger(__name__)


FALLBACK_INSIGHTS = InsightsResult(
    story=(
        "James Clear, after suffering a severe injury as a teenager, struggled to regain "
        "his momentum. With no habits or tasks to guide him initially, he started small, "
        "focusing on consistency over intensity. This approach led him to develop the "
        "\"atomic habits\" framework, transforming his life and inspiring millions."
    ),
    tips=[
        "Start with small, manageable actions to build momentum.",
        "Track your progress daily to stay motivated.",
        "Focus on consistency rather than perfection.",
    ],
    feedback="You haven't started tracking habits or tasks yet—now's a great time to begin!",
    areasToImprove=[
        "Begin by adding at least one habit or task to analyze.",
        "Set clear, achievable goals to measure your progress.",
    ],
)


class InsightsGenerator:
    """Generates insights for a user's habits and tasks."""

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client
        logger.info("InsightsGenerator initialized")

    def generate(
        self,
        habits: Optional[Sequence[HabitRecord]] = None,
        tasks: Optional[Sequence[TaskRecord]] = None
    ) -> InsightsResult:
        """
        Generate insights for the given data.

        Args:
            habits: The user's habits (may be empty or None)
            tasks: The user's tasks (may be empty or None)

        Returns:
            InsightsResult, or FALLBACK_INSIGHTS when there is no data

        Raises:
            ProviderError: If the model fails or returns an unusable result
        """
        habits = list(habits or [])
        tasks = list(tasks or [])

        if not habits and not tasks:
            logger.info("No habits or tasks provided, returning fallback insights")
            return FALLBACK_INSIGHTS.model_copy(deep=True)

        logger.info(f"Generating insights: habits={len(habits)}, tasks={len(tasks)}")
        prompt = build_insights_prompt(habits, tasks)

        try:
            payload = self.llm_client.generate_insights_json(prompt, INSIGHTS_SYSTEM_PROMPT)
        except LLMError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error calling insights model: {e}")
            raise ProviderError(f"Insights model call failed: {e}", provider="google") from e

        # Accept both {"insights": {...}} and a bare result object
        if "insights" not in payload:
            payload = {"insights": payload}

        try:
            result = InsightsResponse.model_validate(payload).insights
        except PydanticValidationError as e:
            logger.error(f"Model output failed insights schema: {e}")
            raise ProviderError("Model output failed insights schema", provider="google") from e

        if not result.is_complete():
            logger.error("Model returned incomplete insights")
            raise ProviderError("Model returned incomplete insights", provider="google")

        return result
