"""
Keypair Route

Issue fresh Ed25519 key pairs. Nothing is retained server-side; the caller
owns custody of the returned secret key.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.models.responses import KeypairResponse
from core.crypto import encode_base58, encode_hex, generate_keypair


logger = logging.getLogger(__name__)

router = APIRouter(tags=["keys"])


@router.get("/generate-keypair", response_model=KeypairResponse)
def generate_keypair_route() -> KeypairResponse:
    """
    Generate a new key pair.

    Returns the public key as base58 and the 64-byte expanded secret key
    (seed || public key) as hex.
    """
    keypair = generate_keypair()
    public_key = encode_base58(keypair.public_key)
    logger.debug(f"Generated keypair for public key {public_key}")
    return KeypairResponse(
        public_key=public_key,
        secret_key=encode_hex(keypair.secret_key),
    )
