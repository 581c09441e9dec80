"""
Signer Service HTTP API (FastAPI)

- GET /generate-keypair - Fresh Ed25519 key pair
- POST /sign-message - Detached signature over a message
- POST /verify-message - Verify a detached signature
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
