"""
LLM Client for Groq and Google Gemini.

This module provides a clean interface to the two hosted model providers:
- Groq (LLaMA) for action extraction
- Google Gemini for insights generation

Both calls run in JSON mode, carry an explicit timeout and are made exactly
once: failures are surfaced to the caller, never retried.
"""
import json
import re
from typing import Any, Dict, Optional

import google.generativeai as genai
from groq import Groq

from pomorise.core.config import Settings
from pomorise.core.exceptions import ProviderError
from pomorise.core.logging_config import get_logger

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class LLMError(ProviderError):
    """
    Custom exception for LLM-related errors.

    Wraps every provider SDK error and every unparseable answer into a
    single type for the service layer.
    """

    def __init__(self, message: str = "LLM service unavailable", provider: Optional[str] = None):
        super().__init__(message, provider=provider)


def parse_json_object(raw: Optional[str]) -> Dict[str, Any]:
    """
    Decode a model answer that is expected to be one JSON object.

    Tolerates surrounding whitespace and markdown code fences.

    Raises:
        ValueError: If the answer is empty or not a JSON object
    """
    if not raw or not raw.strip():
        raise ValueError("Model returned an empty response")

    cleaned = _FENCE_RE.sub("", raw.strip())
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class LLMClient:
    """
    Client for interacting with Groq and Google Gemini APIs.

    Model identity, temperature and timeout come from Settings and are
    fixed for the lifetime of the client.

    Example:
        >>> client = LLMClient(settings)
        >>> data = client.generate_action_json(prompt, system_prompt)
    """

    def __init__(self, settings: Settings, groq_client: Optional[Groq] = None):
        """
        Initialize clients for both providers.

        Args:
            settings: Application settings
            groq_client: Pre-built Groq client (used by tests)
        """
        self.settings = settings
        self.timeout = settings.provider_timeout_seconds
        self.max_tokens = settings.llm_max_tokens

        self.groq_client = groq_client or Groq(
            api_key=settings.groq_api_key,
            timeout=self.timeout,
            max_retries=0,
        )

        genai.configure(api_key=settings.google_api_key)

        logger.info(
            f"LLM Client initialized (actions={settings.action_model}, "
            f"insights={settings.insights_model}, timeout={self.timeout}s)"
        )

    def generate_action_json(self, prompt: str, system_prompt: str) -> Dict[str, Any]:
        """
        Ask the Groq model for one JSON object.

        Args:
            prompt: User prompt
            system_prompt: System prompt carrying the output schema

        Returns:
            Decoded JSON object

        Raises:
            LLMError: On provider failure or non-JSON output
        """
        model = self.settings.action_model
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]

        try:
            response = self.groq_client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=self.settings.action_temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"Groq request failed ({model}): {e}")
            raise LLMError(f"Groq request failed: {e}", provider="groq") from e

        try:
            return parse_json_object(content)
        except ValueError as e:
            logger.error(f"Groq returned invalid JSON ({model}): {e}")
            raise LLMError(f"Groq returned invalid JSON: {e}", provider="groq") from e

    def generate_insights_json(self, prompt: str, system_prompt: str) -> Dict[str, Any]:
        """
        Ask the Gemini model for one JSON object.

        Args:
            prompt: User prompt
            system_prompt: System instruction describing the output shape

        Returns:
            Decoded JSON object

        Raises:
            LLMError: On provider failure, blocked content or non-JSON output
        """
        model = self.settings.insights_model

        try:
            model_instance = genai.GenerativeModel(
                model_name=model,
                system_instruction=system_prompt,
            )
            generation_config = genai.types.GenerationConfig(
                temperature=self.settings.insights_temperature,
                max_output_tokens=self.max_tokens,
                response_mime_type="application/json",
            )
            response = model_instance.generate_content(
                prompt,
                generation_config=generation_config,
                request_options={"timeout": self.timeout},
            )
            # Raises ValueError when the candidate was blocked
            content = response.text
        except Exception as e:
            logger.error(f"Gemini request failed ({model}): {e}")
            raise LLMError(f"Gemini request failed: {e}", provider="google") from e

        try:
            return parse_json_object(content)
        except ValueError as e:
            logger.error(f"Gemini returned invalid JSON ({model}): {e}")
            raise LLMError(f"Gemini returned invalid JSON: {e}", provider="google") from e
