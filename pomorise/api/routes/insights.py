"""
Insights Routes - Motivational summary of a user's habits and tasks.

POST /api/insights
    Body: {"habits"?: Habit[], "tasks"?: Task[]}
    200:  {"insights": {"story", "tips", "feedback", "areasToImprove"}}
    400:  {"error": "Invalid request data", "details": [...]}
    500:  {"error": "Internal server error"}
"""
import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from pomorise.api.deps import get_insights_generator, read_json_body
from pomorise.core.exceptions import ProviderError
from pomorise.core.logging_config import get_logger
from pomorise.models.api import InsightsErrorResponse
from pomorise.models.insights import InsightsRequest, InsightsResponse
from pomorise.services.insights_service import InsightsGenerator

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/insights",
    tags=["Insights"],
    responses={
        400: {"model": InsightsErrorResponse, "description": "Invalid request data"},
        500: {"model": InsightsErrorResponse, "description": "Internal server error"},
    }
)


@router.post(
    "",
    response_model=InsightsResponse,
    summary="Generate insights for habits and tasks",
    description="""
    Returns a short story, tips, one sentence of feedback and areas to improve.

    When neither habits nor tasks are sent, a fixed starter response is
    returned without calling the model.
    """
)
async def get_insights(
    request: Request,
    generator: InsightsGenerator = Depends(get_insights_generator),
) -> JSONResponse:
    body = await read_json_body(request)
    if body is None:
        body = {}

    try:
        payload = InsightsRequest.model_validate(body)
    except PydanticValidationError as e:
        logger.warning(f"Rejected insights request: {e.error_count()} error(s)")
        details = json.loads(e.json(include_url=False))
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request data", "details": details}
        )

    try:
        result = await run_in_threadpool(generator.generate, payload.habits, payload.tasks)
    except ProviderError as e:
        logger.error(f"Error generating insights: {e.message}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return JSONResponse(content={"insights": result.model_dump(mode="json")})
