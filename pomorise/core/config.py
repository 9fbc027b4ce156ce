"""
Configuration management via environment variables.

This module loads configuration from a .env file using python-dotenv.
All configuration values are accessed through the Settings class, which is
built once at startup and handed to create_app().

Required provider credentials are checked here so that a missing key stops
the process before the first request instead of failing per request.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from pomorise.core.exceptions import ConfigurationError


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:5174",
    "http://localhost:5173",
    "https://pomorise.vercel.app",
)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        groq_api_key: API key for the Groq action model
        action_model: Model identifier used for action extraction
        action_temperature: Sampling temperature for action extraction
        google_api_key: API key for the Google Gemini insights model
        insights_model: Model identifier used for insights generation
        insights_temperature: Sampling temperature for insights generation
        llm_max_tokens: Maximum response length for both models
        elevenlabs_api_key: API key for speech-to-text (optional)
        speech_model_id: ElevenLabs transcription model
        supabase_url: Identity provider URL (optional)
        supabase_anon_key: Identity provider public key (optional)
        allowed_origins: Origins accepted by the CORS middleware
        port: Listening port
        provider_timeout_seconds: Timeout applied to every provider call
        enable_audit_logging: Toggle for the request audit middleware
        log_dir: Directory for daily log files (optional)
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str

    # LLM settings
    groq_api_key: str
    action_model: str
    action_temperature: float
    google_api_key: str
    insights_model: str
    insights_temperature: float
    llm_max_tokens: int

    # Speech-to-text
    elevenlabs_api_key: Optional[str]
    speech_model_id: str

    # Identity provider
    supabase_url: Optional[str]
    supabase_anon_key: Optional[str]

    # HTTP settings
    allowed_origins: Tuple[str, ...]
    port: int
    provider_timeout_seconds: float
    enable_audit_logging: bool

    # Logging
    log_dir: Optional[str] = None

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    @property
    def speech_enabled(self) -> bool:
        return bool(self.elevenlabs_api_key)

    @property
    def auth_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ConfigurationError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None or (default is None and not value.strip()):
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_optional_env(key: str) -> Optional[str]:
    """Get an environment variable, treating empty strings as unset."""
    value = os.environ.get(key, "").strip()
    return value or None


def _parse_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists for the lifetime of the process.

    Returns:
        Settings instance with all configuration values

    Raises:
        ConfigurationError: If required environment variables are missing
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "Pomorise"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),

        # LLM
        groq_api_key=_get_env("GROQ_API_KEY"),
        action_model=_get_env("ACTION_MODEL", "llama-3.3-70b-versatile"),
        action_temperature=float(_get_env("ACTION_TEMPERATURE", "0.0")),
        google_api_key=_get_env("GOOGLE_API_KEY"),
        insights_model=_get_env("INSIGHTS_MODEL", "gemini-2.0-flash"),
        insights_temperature=float(_get_env("INSIGHTS_TEMPERATURE", "0.7")),
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "1024")),

        # Speech
        elevenlabs_api_key=_get_optional_env("ELEVENLABS_API_KEY"),
        speech_model_id=_get_env("SPEECH_MODEL_ID", "scribe_v1"),

        # Auth
        supabase_url=_get_optional_env("SUPABASE_URL"),
        supabase_anon_key=_get_optional_env("SUPABASE_ANON_KEY"),

        # HTTP
        allowed_origins=_parse_origins(_get_optional_env("ALLOWED_ORIGINS")),
        port=int(_get_env("PORT", "8000")),
        provider_timeout_seconds=float(_get_env("PROVIDER_TIMEOUT_SECONDS", "30")),
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",

        # Logging
        log_dir=_get_optional_env("LOG_DIR"),
    )
