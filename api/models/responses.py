"""
API Response Models

Pydantic models for API response serialization. Wire names are camelCase
to match existing clients; use model_dump(by_alias=True).
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "signer-service"
    version: str = "v1"


class KeypairResponse(BaseModel):
    """Response for GET /generate-keypair."""

    model_config = ConfigDict(populate_by_name=True)

    public_key: str = Field(..., alias="publicKey", description="Base58 public key")
    secret_key: str = Field(..., alias="secretKey", description="Hex expanded secret key")


class SignResponse(BaseModel):
    """Response for POST /sign-message."""

    signature: str = Field(..., description="Hex detached signature")


class VerifyResponse(BaseModel):
    """Response for POST /verify-message."""

    verified: bool = Field(..., description="Whether the signature is valid")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Human-readable error message")
