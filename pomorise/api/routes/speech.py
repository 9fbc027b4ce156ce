"""
Speech Routes - Speech-to-text relay.

POST /api/speech  (multipart/form-data, field "file")
    200:  {"success": true, "text": str, "processingTime": ms}
    400:  {"success": false, "error": "No valid audio file provided"}
    500:  {"success": false, "error": ...}
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from pomorise.api.deps import get_app_settings, get_speech_transcriber
from pomorise.core.config import Settings
from pomorise.core.exceptions import ProviderError, ValidationError
from pomorise.core.logging_config import get_logger
from pomorise.models.api import FailureResponse, SpeechResponse
from pomorise.services.speech_service import SpeechTranscriber, TranscriptionAPIError

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/speech",
    tags=["Speech"],
    responses={
        400: {"model": FailureResponse, "description": "No valid audio file provided"},
        500: {"model": FailureResponse, "description": "Transcription failed"},
    }
)

NO_AUDIO = "No valid audio file provided"
NOT_CONFIGURED = "Speech-to-text provider is not configured"
CONVERSION_FAILED = "Failed to process speech to text conversion"


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.post(
    "",
    response_model=SpeechResponse,
    summary="Transcribe an audio recording",
)
async def convert_speech(
    request: Request,
    transcriber: Optional[SpeechTranscriber] = Depends(get_speech_transcriber),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    if transcriber is None:
        logger.error("Speech request received but ElevenLabs API key is not configured")
        return _error(500, NOT_CONFIGURED)

    try:
        form = await request.form()
    except Exception as e:
        logger.warning(f"Could not parse speech upload: {e}")
        return _error(400, NO_AUDIO)

    audio_file = form.get("file")
    if not isinstance(audio_file, UploadFile):
        logger.warning("No valid audio file provided")
        return _error(400, NO_AUDIO)

    content = await audio_file.read()

    try:
        result = await run_in_threadpool(
            transcriber.transcribe, content, audio_file.filename, audio_file.content_type
        )
    except ValidationError as e:
        return _error(400, e.message)
    except TranscriptionAPIError as e:
        return _error(500, e.message)
    except ProviderError as e:
        logger.error(f"Error converting speech to text: {e.message}")
        return _error(500, CONVERSION_FAILED, details=e.message if settings.is_development() else None)

    return JSONResponse(content={
        "success": True,
        "text": result.text,
        "processingTime": result.processing_time_ms,
    })
