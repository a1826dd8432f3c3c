"""
Typed record errors and the global exception handlers that expose them.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging

# Set up logging
logger = logging.getLogger(__name__)

class RecordsException(Exception):
    """
    Base exception class for record-service errors.
    
    Attributes:
        kind: Error kind reported to callers ("NotFound" or "InvalidPayload")
        status_code: HTTP status used when the error reaches the API
        detail: Human-readable description of the failing field or id
    """
    kind = "Error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict:
        """Typed error body, e.g. {"NotFound": "..."}."""
        return {self.kind: self.detail}


class NotFoundError(RecordsException):
    """Exception raised when an id is unknown or a referenced entity is absent."""
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidPayloadError(RecordsException):
    """Exception raised when a payload fails validation."""
    kind = "InvalidPayload"
    status_code = status.HTTP_400_BAD_REQUEST


async def records_exception_handler(request: Request, exc: RecordsException):
    """
    Handler for record-service exceptions.
    
    Args:
        request: The request that caused the exception
        exc: The exception instance
        
    Returns:
        JSONResponse: Typed error response
    """
    logger.warning(f"{exc.kind} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.to_dict()}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.
    
    Malformed request bodies are reported as InvalidPayload, naming the first
    failing field.
    
    Args:
        request: The request that caused the exception
        exc: The validation exception instance
        
    Returns:
        JSONResponse: Typed error response with validation details
    """
    errors = exc.errors()
    logger.warning(f"Validation error: {errors}")
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{field or 'body'}: {first.get('msg', 'invalid value')}"
    else:
        detail = "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": InvalidPayloadError(detail).to_dict()}
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.
    
    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(RecordsException, records_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
