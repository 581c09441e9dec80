"""
Ed25519 Signatures

Key generation, detached signing and verification over raw bytes.

Key conventions:
- Public key: 32 bytes
- Secret key: 64 bytes, seed (32) || public key (32), the NaCl/Solana
  "expanded" form. Both halves feed libsodium's crypto_sign as given; the
  public half is not cross-checked against the seed.
- Signature: 64 bytes, detached

Randomness comes from libsodium's CSPRNG, which is safe to call from
concurrent request handlers.
"""
from __future__ import annotations

from dataclasses import dataclass

from nacl.bindings import crypto_sign
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey


PUBLIC_KEY_SIZE = 32
SEED_SIZE = 32
SECRET_KEY_SIZE = SEED_SIZE + PUBLIC_KEY_SIZE
SIGNATURE_SIZE = 64


@dataclass(frozen=True)
class KeyPair:
    """An Ed25519 key pair in raw bytes."""
    public_key: bytes
    secret_key: bytes

    @property
    def seed(self) -> bytes:
        return self.secret_key[:SEED_SIZE]


def generate_keypair() -> KeyPair:
    """
    Generate a fresh Ed25519 key pair.

    Returns:
        KeyPair with a 32-byte public key and 64-byte expanded secret key
    """
    signing_key = SigningKey.generate()
    public_key = signing_key.verify_key.encode()
    return KeyPair(
        public_key=public_key,
        secret_key=signing_key.encode() + public_key,
    )


def sign(message: bytes, secret_key: bytes) -> bytes:
    """
    Produce a detached Ed25519 signature.

    Args:
        message: Raw bytes to sign
        secret_key: 64-byte expanded secret key

    Returns:
        64-byte signature

    Raises:
        ValueError: If secret_key is not 64 bytes
    """
    if len(secret_key) != SECRET_KEY_SIZE:
        raise ValueError(
            f"secret key must be {SECRET_KEY_SIZE} bytes, got {len(secret_key)}"
        )
    # crypto_sign returns signature || message
    return crypto_sign(message, secret_key)[:SIGNATURE_SIZE]


def verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Verify a detached Ed25519 signature.

    A signature that does not match is a normal False result, not an error.

    Raises:
        ValueError: If signature or public_key has the wrong length
    """
    if len(signature) != SIGNATURE_SIZE:
        raise ValueError(
            f"signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
        )
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(
            f"public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )
    try:
        VerifyKey(public_key).verify(message, signature)
    except BadSignatureError:
        return False
    return True
