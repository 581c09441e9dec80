"""API route handlers."""

from api.routes import health, keys, signing

__all__ = ["health", "keys", "signing"]
