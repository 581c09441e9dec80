"""
Core cryptographic utilities.

Ed25519 signing primitives plus the hex/base58 codecs used at the
service boundary.
"""
from .encoding import (
    Decoded,
    encode_hex,
    decode_hex,
    encode_base58,
    decode_base58,
)
from .signatures import (
    KeyPair,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SIGNATURE_SIZE,
    generate_keypair,
    sign,
    verify,
)

__all__ = [
    "Decoded",
    "encode_hex",
    "decode_hex",
    "encode_base58",
    "decode_base58",
    "KeyPair",
    "PUBLIC_KEY_SIZE",
    "SECRET_KEY_SIZE",
    "SIGNATURE_SIZE",
    "generate_keypair",
    "sign",
    "verify",
]
