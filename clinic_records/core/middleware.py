"""
Request logging for the records API.

Every request carries a request id: the caller's ``X-Request-ID`` when one is
sent, otherwise a fresh UUID. The id and the handling time are echoed back in
response headers, and the outcome is logged at a level matching the status:
rejected record requests (4xx) at WARNING, server failures at ERROR.
"""
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Set up logging
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


def _log_level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RecordRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with a request id and logs how it was answered.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Args:
            request: The incoming request
            call_next: The next middleware or endpoint handler
            
        Returns:
            Response: The handler's response with request id and timing headers
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"[{request_id}] {route} raised after {time.perf_counter() - started:.4f}s")
            raise

        elapsed = time.perf_counter() - started
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"
        logger.log(
            _log_level_for(response.status_code),
            f"[{request_id}] {route} -> {response.status_code} in {elapsed:.4f}s",
        )
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.
    
    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RecordRequestLoggingMiddleware)
