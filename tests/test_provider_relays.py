from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests

from pomorise.core.exceptions import AuthenticationError, ProviderError, ValidationError
from pomorise.services.auth_service import AuthProviderError, AuthService
from pomorise.services.speech_service import (
    ELEVENLABS_STT_URL,
    SpeechTranscriber,
    TranscriptionAPIError,
)


def _http_response(ok=True, status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.text = text
    response.reason = "Error"
    response.json.return_value = {} if json_data is None else json_data
    return response


class TestSpeechTranscriber:

    def test_transcribe_posts_audio(self, settings, mock_http_session):
        mock_http_session.post.return_value = _http_response(json_data={"text": "add a task"})

        result = SpeechTranscriber(settings, session=mock_http_session).transcribe(
            b"RIFF....", "note.wav", "audio/wav"
        )

        assert result.text == "add a task"
        assert result.processing_time_ms >= 0
        call = mock_http_session.post.call_args
        assert call.args == (ELEVENLABS_STT_URL,)
        assert call.kwargs["headers"] == {"xi-api-key": "test-elevenlabs-key"}
        assert call.kwargs["files"] == {"file": ("note.wav", b"RIFF....", "audio/wav")}
        assert call.kwargs["data"] == {"model_id": "scribe_v1"}
        assert call.kwargs["timeout"] == 5.0

    def test_empty_upload_is_rejected(self, settings, mock_http_session):
        with pytest.raises(ValidationError):
            SpeechTranscriber(settings, session=mock_http_session).transcribe(b"")
        mock_http_session.post.assert_not_called()

    def test_non_2xx_is_api_error(self, settings, mock_http_session):
        mock_http_session.post.return_value = _http_response(ok=False, status_code=401, text="invalid key")

        with pytest.raises(TranscriptionAPIError) as exc_info:
            SpeechTranscriber(settings, session=mock_http_session).transcribe(b"abc")

        assert exc_info.value.message == "API error: 401 - invalid key"

    def test_network_failure_is_provider_error(self, settings, mock_http_session):
        mock_http_session.post.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(ProviderError) as exc_info:
            SpeechTranscriber(settings, session=mock_http_session).transcribe(b"abc")

        assert not isinstance(exc_info.value, TranscriptionAPIError)

    def test_missing_text_becomes_empty_string(self, settings, mock_http_session):
        mock_http_session.post.return_value = _http_response(json_data={"language_code": "en"})

        result = SpeechTranscriber(settings, session=mock_http_session).transcribe(b"abc")

        assert result.text == ""

    @pytest.mark.parametrize("json_data", [["hello"], "hello", 3, None])
    def test_non_object_body_is_provider_error(self, settings, mock_http_session, json_data):
        response = _http_response()
        response.json.return_value = json_data
        mock_http_session.post.return_value = response

        with pytest.raises(ProviderError) as exc_info:
            SpeechTranscriber(settings, session=mock_http_session).transcribe(b"abc")

        assert exc_info.value.message == "ElevenLabs returned invalid JSON"

    def test_non_string_text_becomes_empty_string(self, settings, mock_http_session):
        mock_http_session.post.return_value = _http_response(json_data={"text": ["a", "b"]})

        result = SpeechTranscriber(settings, session=mock_http_session).transcribe(b"abc")

        assert result.text == ""


class TestAuthService:

    def test_sign_in_returns_token_and_user(self, settings, mock_supabase):
        mock_supabase.auth.sign_in_with_password.return_value = SimpleNamespace(
            session=SimpleNamespace(access_token="jwt-token"),
            user={"id": "u1", "email": "me@example.com"},
        )

        result = AuthService(settings, client=mock_supabase).sign_in("me@example.com", "secret123")

        assert result == {"token": "jwt-token", "user": {"id": "u1", "email": "me@example.com"}}
        mock_supabase.auth.sign_in_with_password.assert_called_once_with(
            {"email": "me@example.com", "password": "secret123"}
        )

    def test_sign_in_rejection(self, settings, mock_supabase):
        error = Exception("Invalid login credentials")
        mock_supabase.auth.sign_in_with_password.side_effect = error

        with pytest.raises(AuthProviderError) as exc_info:
            AuthService(settings, client=mock_supabase).sign_in("me@example.com", "wrongpass")

        assert exc_info.value.message == "Invalid login credentials"

    def test_sign_up_stores_name_as_metadata(self, settings, mock_supabase):
        mock_supabase.auth.sign_up.return_value = SimpleNamespace(user={"id": "u2"}, session=None)

        result = AuthService(settings, client=mock_supabase).sign_up("new@example.com", "secret123", "Ada")

        assert result == {"user": {"id": "u2"}}
        mock_supabase.auth.sign_up.assert_called_once_with({
            "email": "new@example.com",
            "password": "secret123",
            "options": {"data": {"name": "Ada"}},
        })

    def test_logout_revokes_token(self, settings, mock_supabase):
        AuthService(settings, client=mock_supabase).logout("jwt-token")
        mock_supabase.auth.admin.sign_out.assert_called_once_with("jwt-token")

    def test_get_user_rejects_bad_token(self, settings, mock_supabase):
        mock_supabase.auth.get_user.side_effect = Exception("invalid JWT")

        with pytest.raises(AuthenticationError) as exc_info:
            AuthService(settings, client=mock_supabase).get_user("bad")

        assert exc_info.value.message == "Invalid token"

    def test_get_user_without_user_is_rejected(self, settings, mock_supabase):
        mock_supabase.auth.get_user.return_value = None

        with pytest.raises(AuthenticationError):
            AuthService(settings, client=mock_supabase).get_user("expired")
