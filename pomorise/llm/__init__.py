"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Groq and Google Gemini
- JSON response decoding
"""
from pomorise.llm.client import LLMClient, LLMError, parse_json_object

__all__ = [
    "LLMClient",
    "LLMError",
    "parse_json_object",
]
