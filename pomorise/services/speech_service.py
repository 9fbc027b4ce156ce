"""
Speech Service - Relays uploaded audio to the ElevenLabs speech-to-text API.
"""
import time
from dataclasses import dataclass
from typing import Optional

import requests

from pomorise.core.config import Settings
from pomorise.core.exceptions import ProviderError, ValidationError
from pomorise.core.logging_config import get_logger

logger = get_logger(__name__)

ELEVENLABS_STT_URL = "https://api.elevenlabs.io/v1/speech-to-text"


class TranscriptionAPIError(ProviderError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"API error: {status_code} - {detail}", provider="elevenlabs")
        self.upstream_status = status_code


@dataclass
class TranscriptionResult:
    text: str
    processing_time_ms: int


class SpeechTranscriber:
    """
    Thin client for the speech-to-text provider.

    Example:
        >>> transcriber = SpeechTranscriber(settings)
        >>> result = transcriber.transcribe(audio_bytes, "note.webm", "audio/webm")
        >>> result.text
        'Add a task to call mom'
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """
        Args:
            settings: Application settings (must carry an ElevenLabs key)
            session: Pre-built requests session (used by tests)
        """
        self.api_key = settings.elevenlabs_api_key
        self.model_id = settings.speech_model_id
        self.timeout = settings.provider_timeout_seconds
        self.session = session or requests.Session()
        logger.info(f"SpeechTranscriber initialized (model={self.model_id})")

    def transcribe(
        self,
        content: bytes,
        filename: Optional[str] = None,
        content_type: Optional[str] = None
    ) -> TranscriptionResult:
        """
        Transcribe one audio file.

        Args:
            content: Raw audio bytes
            filename: Original file name, if any
            content_type: MIME type reported by the client

        Returns:
            TranscriptionResult with the text and the elapsed time

        Raises:
            ValidationError: If the upload is empty
            TranscriptionAPIError: If the provider rejects the request
            ProviderError: If the provider cannot be reached or answers garbage
        """
        start_time = time.time()

        if not content:
            raise ValidationError("No valid audio file provided", field="file")

        filename = filename or "unnamed"
        content_type = content_type or "application/octet-stream"
        logger.info(
            f"Processing audio file: name={filename}, type={content_type}, size={len(content)}"
        )

        try:
            response = self.session.post(
                ELEVENLABS_STT_URL,
                headers={"xi-api-key": self.api_key},
                files={"file": (filename, content, content_type)},
                data={"model_id": self.model_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"ElevenLabs request failed: {e}")
            raise ProviderError(f"ElevenLabs request failed: {e}", provider="elevenlabs") from e

        if not response.ok:
            detail = response.text or response.reason or ""
            logger.error(
                f"ElevenLabs API error: status={response.status_code} detail={detail[:200]}"
            )
            raise TranscriptionAPIError(response.status_code, detail)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"ElevenLabs returned invalid JSON: {e}")
            raise ProviderError("ElevenLabs returned invalid JSON", provider="elevenlabs") from e

        if not isinstance(data, dict):
            logger.error(f"ElevenLabs returned a non-object body: {type(data).__name__}")
            raise ProviderError("ElevenLabs returned invalid JSON", provider="elevenlabs")

        text = data.get("text")
        if not isinstance(text, str):
            text = ""

        processing_time = int((time.time() - start_time) * 1000)
        logger.info(f"Transcription completed in {processing_time}ms")

        return TranscriptionResult(
            text=text,
            processing_time_ms=processing_time,
        )
