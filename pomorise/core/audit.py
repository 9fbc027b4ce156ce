"""
Audit Middleware - Request/response logging for monitoring.

This middleware logs all API requests including:
- Request method and path
- Response status code
- Request duration
- A per-request id, echoed back as X-Request-ID

The id is also published through request_id_var for the duration of the
request, so log lines written by routes and services carry it.
"""
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from pomorise.core.logging_config import get_logger, request_id_var

logger = get_logger(__name__)

HEALTH_PATHS = ("/health", "/api/health")


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all requests and responses.

    Captures timing information and key request metadata
    for debugging purposes.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log audit information."""
        start_time = time.time()
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"

        token = request_id_var.set(request_id)
        try:
            try:
                response = await call_next(request)
            except Exception as e:
                duration = time.time() - start_time
                logger.error(
                    f"REQUEST FAILED: {method} {path} "
                    f"client={client_ip} duration={duration:.3f}s error={str(e)}"
                )
                raise

            duration = time.time() - start_time
            self._log_request(
                method=method,
                path=path,
                status_code=response.status_code,
                duration=duration,
                client_ip=client_ip,
            )
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response

    def _log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float,
        client_ip: str,
    ) -> None:
        """Log request details."""
        if path in HEALTH_PATHS:
            logger.debug(
                f"HEALTH: {path} status={status_code} duration={duration:.3f}s"
            )
            return

        if status_code >= 500:
            log_fn = logger.error
        elif status_code >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"REQUEST: {method} {path} "
            f"status={status_code} duration={duration:.3f}s "
            f"client={client_ip}"
        )
