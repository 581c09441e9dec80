"""
API Dependencies

Dependency injection for the API: request body parsing.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from api.errors import InvalidRequestError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def json_body(request: Request) -> Any:
    """
    Read the request body as JSON.

    Returns None for an empty or malformed body so the route can report
    it with its own missing-field message.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug(f"Malformed JSON body on {request.url.path}")
        return None


def parse_body(model: type[ModelT], payload: Any, message: str) -> ModelT:
    """
    Validate a decoded JSON payload against a request schema.

    Raises:
        InvalidRequestError: payload is not an object or fails validation
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError(message)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"{model.__name__} validation failed: {e.error_count()} error(s)")
        raise InvalidRequestError(message) from e
