"""API request and response models."""

from api.models.requests import SignRequest, VerifyRequest
from api.models.responses import (
    HealthResponse,
    KeypairResponse,
    SignResponse,
    VerifyResponse,
    ErrorResponse,
)

__all__ = [
    "SignRequest",
    "VerifyRequest",
    "HealthResponse",
    "KeypairResponse",
    "SignResponse",
    "VerifyResponse",
    "ErrorResponse",
]
