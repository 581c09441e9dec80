"""
Boundary Encodings

Text <-> bytes codecs used at the API and CLI boundary:
- Hexadecimal for secret keys and signatures
- Base58 (Bitcoin alphabet) for public keys

Decoders never raise on malformed input. They return a Decoded result
carrying either the bytes or a short error string, so callers can choose
the response without try/except around every field.
"""
from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import Optional

import base58


@dataclass(frozen=True)
class Decoded:
    """Outcome of decoding one text field."""
    value: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: bytes) -> "Decoded":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "Decoded":
        return cls(error=error)


def _check_length(raw: bytes, length: Optional[int]) -> Decoded:
    if length is not None and len(raw) != length:
        return Decoded.failure(f"expected {length} bytes, got {len(raw)}")
    return Decoded.success(raw)


def encode_hex(data: bytes) -> str:
    """
    Encode bytes as lowercase hex without prefix.

    Example:
        >>> encode_hex(b"\\xde\\xad")
        'dead'
    """
    return data.hex()


def decode_hex(text: str, length: Optional[int] = None) -> Decoded:
    """
    Decode a hex string (no 0x prefix, either case).

    Args:
        text: Hex text
        length: Required decoded length in bytes, or None for any length

    Returns:
        Decoded result; failure on odd length, non-hex characters,
        embedded whitespace or a length mismatch.
    """
    if not text.isascii():
        return Decoded.failure("non-ascii characters in hex string")
    try:
        raw = binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        return Decoded.failure(f"invalid hex: {e}")
    return _check_length(raw, length)


def encode_base58(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    return base58.b58encode(data).decode("ascii")


def decode_base58(text: str, length: Optional[int] = None) -> Decoded:
    """
    Decode base58 text (Bitcoin alphabet).

    Args:
        text: Base58 text
        length: Required decoded length in bytes, or None for any length
    """
    if not text or not text.isascii():
        return Decoded.failure("invalid base58 string")
    if any(c.isspace() for c in text):
        return Decoded.failure("whitespace in base58 string")
    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        return Decoded.failure(f"invalid base58: {e}")
    return _check_length(raw, length)


__all__ = [
    "Decoded",
    "encode_hex",
    "decode_hex",
    "encode_base58",
    "decode_base58",
]
