"""
Request dependencies.

Services are built once in create_app() and stored on app.state;
routes receive them through these dependencies.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Request

from pomorise.core.config import Settings
from pomorise.core.exceptions import AuthenticationError, ConfigurationError
from pomorise.core.logging_config import get_logger
from pomorise.core.validators import parse_bearer_token
from pomorise.llm.client import LLMClient
from pomorise.services.action_service import ActionClassifier
from pomorise.services.auth_service import AuthService
from pomorise.services.insights_service import InsightsGenerator
from pomorise.services.speech_service import SpeechTranscriber

logger = get_logger(__name__)


@dataclass
class ServiceContainer:
    """Everything the routes need, built once per process."""
    action_classifier: ActionClassifier
    insights_generator: InsightsGenerator
    speech_transcriber: Optional[SpeechTranscriber] = None
    auth_service: Optional[AuthService] = None


def build_services(settings: Settings) -> ServiceContainer:
    """
    Construct the provider clients and services from settings.

    The model clients are mandatory. Speech and auth are optional
    subsystems that stay disabled when their credentials are absent.

    Raises:
        ConfigurationError: If a model API key is missing
    """
    if not settings.groq_api_key:
        raise ConfigurationError("GROQ_API_KEY is required for action extraction")
    if not settings.google_api_key:
        raise ConfigurationError("GOOGLE_API_KEY is required for insights generation")

    llm_client = LLMClient(settings)

    speech_transcriber = None
    if settings.speech_enabled:
        speech_transcriber = SpeechTranscriber(settings)
    else:
        logger.warning("ELEVENLABS_API_KEY not set, speech-to-text disabled")

    auth_service = None
    if settings.auth_enabled:
        auth_service = AuthService(settings)
    else:
        logger.warning("SUPABASE_URL/SUPABASE_ANON_KEY not set, auth relay disabled")

    return ServiceContainer(
        action_classifier=ActionClassifier(llm_client),
        insights_generator=InsightsGenerator(llm_client),
        speech_transcriber=speech_transcriber,
        auth_service=auth_service,
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_action_classifier(request: Request) -> ActionClassifier:
    return request.app.state.services.action_classifier


def get_insights_generator(request: Request) -> InsightsGenerator:
    return request.app.state.services.insights_generator


def get_speech_transcriber(request: Request) -> Optional[SpeechTranscriber]:
    return request.app.state.services.speech_transcriber


def get_auth_service(request: Request) -> Optional[AuthService]:
    return request.app.state.services.auth_service


def require_user(request: Request) -> Dict[str, Any]:
    """
    Resolve the caller from the Authorization bearer token.

    Raises:
        AuthenticationError: If the header is missing or the token is rejected
    """
    auth_service = get_auth_service(request)
    if auth_service is None:
        raise ConfigurationError("Auth provider is not configured")

    token = parse_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise AuthenticationError("Unauthorized")

    user = auth_service.get_user(token)
    request.state.user = user
    return user


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Returns:
        The decoded value, or None when the body is empty or not JSON
    """
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        logger.debug(f"Request body is not valid JSON: path={request.url.path}")
        return None
