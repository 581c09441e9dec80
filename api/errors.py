"""
API Error Handling

Standardized error handling for the API. Every error body has the shape
{"error": "<message>"}; internal detail never reaches the client.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message)


class InvalidRequestError(APIError):
    """Required request fields missing, empty or of the wrong type."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=400)


class InvalidEncodingError(InvalidRequestError):
    """A present field failed hex/base58 decoding or has the wrong byte length."""


class InternalError(APIError):
    """Internal server error."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, status_code=500)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=InternalError().to_response().model_dump(),
    )
