"""
Services module - Business logic and orchestration.

Services contain the application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate between prompts, provider clients and schemas
"""
from pomorise.services.action_service import ActionClassifier
from pomorise.services.insights_service import FALLBACK_INSIGHTS, InsightsGenerator
from pomorise.services.speech_service import SpeechTranscriber, TranscriptionAPIError, TranscriptionResult
from pomorise.services.auth_service import AuthProviderError, AuthService

__all__ = [
    "ActionClassifier",
    "FALLBACK_INSIGHTS",
    "InsightsGenerator",
    "SpeechTranscriber",
    "TranscriptionAPIError",
    "TranscriptionResult",
    "AuthProviderError",
    "AuthService",
]
