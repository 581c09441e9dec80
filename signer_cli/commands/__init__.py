"""
CLI command modules.
"""

from signer_cli.commands import keys, serve

__all__ = ["keys", "serve"]
