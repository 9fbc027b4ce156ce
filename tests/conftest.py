import dataclasses
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from pomorise.api.app import create_app
from pomorise.api.deps import ServiceContainer
from pomorise.core.config import Settings
from pomorise.llm.client import LLMClient
from pomorise.services.action_service import ActionClassifier
from pomorise.services.auth_service import AuthService
from pomorise.services.insights_service import InsightsGenerator
from pomorise.services.speech_service import SpeechTranscriber


def make_settings(**overrides) -> Settings:
    base = Settings(
        app_name="Pomorise",
        app_env="development",
        log_level="DEBUG",
        groq_api_key="test-groq-key",
        action_model="llama-3.3-70b-versatile",
        action_temperature=0.0,
        google_api_key="test-google-key",
        insights_model="gemini-2.0-flash",
        insights_temperature=0.7,
        llm_max_tokens=1024,
        elevenlabs_api_key="test-elevenlabs-key",
        speech_model_id="scribe_v1",
        supabase_url="https://example.supabase.co",
        supabase_anon_key="test-anon-key",
        allowed_origins=("http://localhost:5173", "https://pomorise.vercel.app"),
        port=8000,
        provider_timeout_seconds=5.0,
        enable_audit_logging=True,
    )
    return dataclasses.replace(base, **overrides)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def mock_llm():
    return MagicMock(spec=LLMClient)


@pytest.fixture
def mock_http_session():
    return MagicMock()


@pytest.fixture
def mock_supabase():
    return MagicMock()


@pytest.fixture
def services(settings, mock_llm, mock_http_session, mock_supabase):
    return ServiceContainer(
        action_classifier=ActionClassifier(mock_llm),
        insights_generator=InsightsGenerator(mock_llm),
        speech_transcriber=SpeechTranscriber(settings, session=mock_http_session),
        auth_service=AuthService(settings, client=mock_supabase),
    )


@pytest.fixture
def client(settings, services):
    app = create_app(settings, services)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def habit_record():
    return {
        "id": "h1",
        "name": "Morning run",
        "description": "Run 5km before work",
        "isPositive": True,
        "targetDays": 30,
        "currentStreak": 4,
        "longestStreak": 10,
        "completedDates": ["2025-04-01", "2025-04-02"],
        "lastCompletedDate": "2025-04-02",
        "reminderTime": None,
        "stackedWith": None,
        "created": "2025-03-01T08:00:00Z",
        "color": "#ff6b6b",
    }


@pytest.fixture
def task_record():
    return {
        "id": "t1",
        "title": "Finish report",
        "estimatedPomodoros": 4,
        "completedPomodoros": 1,
        "isCompleted": False,
        "notes": "Quarterly numbers",
        "createdAt": "2025-04-01T09:00:00Z",
        "updatedAt": "2025-04-01T10:00:00Z",
    }


@pytest.fixture
def model_insights():
    return {
        "insights": {
            "story": "A runner started with one lap a day and kept going.",
            "tips": ["Run at the same time every day.", "Split the report into parts.", "Rest well."],
            "feedback": "You are building a strong streak.",
            "areasToImprove": ["Finish more pomodoros per task.", "Track rest days."],
        }
    }
