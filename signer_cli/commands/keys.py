"""
CLI Key Commands

Offline counterparts of the HTTP endpoints:
- keygen: print a fresh key pair
- sign: sign a message with a hex secret key
- verify: check a signature against a message and base58 public key

Usage:
    signer keygen [--json]
    signer sign "<message>" --secret-key HEX [--json]
    signer verify "<message>" --signature HEX --public-key B58 [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from core.crypto import (
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
    SIGNATURE_SIZE,
    decode_base58,
    decode_hex,
    encode_base58,
    encode_hex,
    generate_keypair,
    sign,
    verify,
)


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def keygen_cmd(args: Namespace) -> int:
    """Execute the keygen command."""
    keypair = generate_keypair()
    result = {
        "publicKey": encode_base58(keypair.public_key),
        "secretKey": encode_hex(keypair.secret_key),
    }

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"public_key: {result['publicKey']}")
        print(f"secret_key: {result['secretKey']}")
    return EXIT_SUCCESS


def sign_cmd(args: Namespace) -> int:
    """Execute the sign command."""
    if not args.message:
        print("Error: message must not be empty", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    secret_key = decode_hex(args.secret_key, SECRET_KEY_SIZE)
    if not secret_key.ok:
        print(f"Error: invalid secret key: {secret_key.error}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    signature = encode_hex(sign(args.message.encode("utf-8"), secret_key.value))

    if args.json:
        print(json.dumps({"signature": signature}, indent=2))
    else:
        print(signature)
    return EXIT_SUCCESS


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        0 if verified, 2 if the signature does not match, 1 on bad input
    """
    if not args.message:
        print("Error: message must not be empty", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    signature = decode_hex(args.signature, SIGNATURE_SIZE)
    if not signature.ok:
        print(f"Error: invalid signature: {signature.error}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    public_key = decode_base58(args.public_key, PUBLIC_KEY_SIZE)
    if not public_key.ok:
        print(f"Error: invalid public key: {public_key.error}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    verified = verify(args.message.encode("utf-8"), signature.value, public_key.value)

    if args.json:
        print(json.dumps({"verified": verified}, indent=2))
    else:
        print(f"verified: {str(verified).lower()}")

    if verified:
        return EXIT_SUCCESS
    logger.warning("Signature verification failed")
    return EXIT_VERIFICATION_FAILED
