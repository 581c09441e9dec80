"""
Signer CLI

Command-line interface for the signer service.

Usage:
    python -m signer_cli keygen
    python -m signer_cli sign "hello world" --secret-key <hex>
    python -m signer_cli verify "hello world" --signature <hex> --public-key <base58>
    python -m signer_cli serve --port 5000
"""

__version__ = "0.1.0"
