"""
Auth Routes - Sign-in, sign-up and logout relayed to Supabase Auth.
"""
import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from pomorise.api.deps import get_auth_service, read_json_body, require_user
from pomorise.core.logging_config import get_logger
from pomorise.core.validators import parse_bearer_token
from pomorise.models.api import (
    AuthErrorResponse,
    AuthTokenResponse,
    AuthUserResponse,
    MessageResponse,
    SignInRequest,
    SignUpRequest,
)
from pomorise.services.auth_service import AuthProviderError, AuthService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
    responses={
        400: {"model": AuthErrorResponse},
        401: {"model": AuthErrorResponse},
    }
)

NOT_CONFIGURED = "Auth provider is not configured"


def _error(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def _validation_details(exc: PydanticValidationError) -> Any:
    return json.loads(exc.json(include_url=False, include_input=False))


@router.post("/signin", response_model=AuthTokenResponse, summary="Sign in with email and password")
async def sign_in(
    request: Request,
    auth_service: Optional[AuthService] = Depends(get_auth_service),
) -> JSONResponse:
    if auth_service is None:
        return _error(500, NOT_CONFIGURED)

    try:
        payload = SignInRequest.model_validate(await read_json_body(request) or {})
    except PydanticValidationError as e:
        return _error(400, _validation_details(e))

    try:
        session = await run_in_threadpool(auth_service.sign_in, payload.email, payload.password)
    except AuthProviderError as e:
        return _error(401, e.message)

    return JSONResponse(status_code=200, content=session)


@router.post(
    "/signup",
    response_model=AuthUserResponse,
    status_code=201,
    summary="Create an account",
    description="No token is returned until the email address is verified.",
)
async def sign_up(
    request: Request,
    auth_service: Optional[AuthService] = Depends(get_auth_service),
) -> JSONResponse:
    if auth_service is None:
        return _error(500, NOT_CONFIGURED)

    try:
        payload = SignUpRequest.model_validate(await read_json_body(request) or {})
    except PydanticValidationError as e:
        return _error(400, _validation_details(e))

    try:
        result = await run_in_threadpool(
            auth_service.sign_up, payload.email, payload.password, payload.name
        )
    except AuthProviderError as e:
        return _error(400, e.message)

    logger.info("New account registered")
    return JSONResponse(status_code=201, content=result)


@router.post("/logout", response_model=MessageResponse, summary="Revoke the current session")
async def logout(
    request: Request,
    auth_service: Optional[AuthService] = Depends(get_auth_service),
) -> JSONResponse:
    if auth_service is None:
        return _error(500, NOT_CONFIGURED)

    token = parse_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return _error(401, "Unauthorized")

    try:
        await run_in_threadpool(auth_service.logout, token)
    except AuthProviderError as e:
        return _error(400, e.message)

    return JSONResponse(status_code=200, content={"message": "Logged out successfully"})


@router.get("/me", response_model=AuthUserResponse, summary="Current user from the bearer token")
async def me(
    request: Request,
    auth_service: Optional[AuthService] = Depends(get_auth_service),
) -> JSONResponse:
    if auth_service is None:
        return _error(500, NOT_CONFIGURED)

    user = await run_in_threadpool(require_user, request)
    return JSONResponse(content={"user": user})
