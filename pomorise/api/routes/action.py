"""
Action Routes - Turn a user sentence into a structured action.

POST /api/action
    Body: {"text": str, "context"?: {"tasks"?, "habits"?, "journals"?}}
    200:  {"success": true, "data": Action}
    400:  {"success": false, "error": "Text input is required"}
    500:  {"success": false, "error": "Unable to process this action"}
"""
import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from pomorise.api.deps import get_action_classifier, get_app_settings, read_json_body
from pomorise.core.config import Settings
from pomorise.core.exceptions import ProviderError, ValidationError
from pomorise.core.logging_config import get_logger
from pomorise.core.validators import validate_text
from pomorise.models.actions import dump_action
from pomorise.models.api import ActionRequest, ActionResponse, FailureResponse
from pomorise.services.action_service import ActionClassifier

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/action",
    tags=["Action"],
    responses={
        400: {"model": FailureResponse, "description": "Missing text or invalid context"},
        500: {"model": FailureResponse, "description": "Unable to process this action"},
    }
)

TEXT_REQUIRED = "Text input is required"
INVALID_CONTEXT = "Invalid context data"
UNABLE_TO_PROCESS = "Unable to process this action"


def _error(status_code: int, error: str, details: Any = None) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.post(
    "",
    response_model=ActionResponse,
    summary="Extract an action from user text",
    description="""
    Classify a plain-language instruction into one habits, journal or tasks action.

    Include `context` with the user's existing items so update, delete and
    complete actions can reference the right `id`.

    **Examples:**
    - "I finished the report" → tasks / complete
    - "Start meditating every morning" → habits / add
    - "Write about today's walk" → journal / add
    """
)
async def get_action(
    request: Request,
    classifier: ActionClassifier = Depends(get_action_classifier),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Process a user sentence and return the extracted action."""
    body = await read_json_body(request)
    if not isinstance(body, dict):
        body = {}

    is_valid, _, _ = validate_text(body.get("text"))
    if not is_valid:
        return _error(400, TEXT_REQUIRED)

    try:
        payload = ActionRequest.model_validate(body)
    except PydanticValidationError as e:
        # text is already known to be a non-blank string, so only context can fail
        logger.warning(f"Rejected action context: {e.error_count()} error(s)")
        return _error(400, INVALID_CONTEXT, details=json.loads(e.json(include_url=False)))

    try:
        action = await run_in_threadpool(classifier.classify, payload.text, payload.context)
    except ValidationError as e:
        return _error(400, e.message)
    except ProviderError as e:
        logger.error(f"Action extraction failed: {e.message}")
        return _error(500, UNABLE_TO_PROCESS, details=e.message if settings.is_development() else None)

    return JSONResponse(content={"success": True, "data": dump_action(action)})
