"""
Signing Routes

- POST /sign-message: detached Ed25519 signature over a UTF-8 message
- POST /verify-message: check a signature against a message and public key

Missing fields are rejected before any decoding; decode failures are
rejected before any signing primitive runs. An invalid signature is a
normal {"verified": false} result.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from api.deps import json_body, parse_body
from api.errors import InvalidEncodingError
from api.models.requests import SignRequest, VerifyRequest
from api.models.responses import SignResponse, VerifyResponse
from core.crypto import (
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SIGNATURE_SIZE,
    decode_base58,
    decode_hex,
    encode_hex,
    sign,
    verify,
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["signing"])

SIGN_FIELDS_REQUIRED = "Message and secretKey (hex) are required"
SIGN_INVALID_KEY = "Invalid secretKey format"
VERIFY_FIELDS_REQUIRED = "Message, signature, and publicKey are required"
VERIFY_INVALID_FORMAT = "Invalid public key or signature format"


@router.post("/sign-message", response_model=SignResponse)
def sign_message(payload: Any = Depends(json_body)) -> SignResponse:
    """
    Sign a message with a caller-supplied secret key.

    Input: {message, secretKey (hex, 64 bytes)}
    Returns: {signature (hex)}
    """
    request = parse_body(SignRequest, payload, SIGN_FIELDS_REQUIRED)

    secret_key = decode_hex(request.secret_key, SECRET_KEY_SIZE)
    if not secret_key.ok:
        logger.info(f"Rejected secretKey: {secret_key.error}")
        raise InvalidEncodingError(SIGN_INVALID_KEY)

    signature = sign(request.message.encode("utf-8"), secret_key.value)
    return SignResponse(signature=encode_hex(signature))


@router.post("/verify-message", response_model=VerifyResponse)
def verify_message(payload: Any = Depends(json_body)) -> VerifyResponse:
    """
    Verify a signed message.

    Input: {message, signature (hex), publicKey (base58)}
    Returns: {verified: true/false}
    """
    request = parse_body(VerifyRequest, payload, VERIFY_FIELDS_REQUIRED)

    signature = decode_hex(request.signature, SIGNATURE_SIZE)
    public_key = decode_base58(request.public_key, PUBLIC_KEY_SIZE)
    for name, decoded in (("signature", signature), ("publicKey", public_key)):
        if not decoded.ok:
            logger.info(f"Rejected {name}: {decoded.error}")
            raise InvalidEncodingError(VERIFY_INVALID_FORMAT)

    verified = verify(request.message.encode("utf-8"), signature.value, public_key.value)
    return VerifyResponse(verified=verified)
