"""
API Request Models

Pydantic models for API request validation. Fields are strict, non-empty
strings: a missing, empty or non-string field fails validation and the
route reports it as an invalid request.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class SignRequest(BaseModel):
    """Request body for POST /sign-message."""

    model_config = ConfigDict(populate_by_name=True)

    message: StrictStr = Field(
        ...,
        min_length=1,
        description="UTF-8 text to sign",
    )
    secret_key: StrictStr = Field(
        ...,
        alias="secretKey",
        min_length=1,
        description="64-byte expanded secret key (seed || public key), hex encoded",
    )


class VerifyRequest(BaseModel):
    """Request body for POST /verify-message."""

    model_config = ConfigDict(populate_by_name=True)

    message: StrictStr = Field(
        ...,
        min_length=1,
        description="UTF-8 text that was signed",
    )
    signature: StrictStr = Field(
        ...,
        min_length=1,
        description="64-byte detached signature, hex encoded",
    )
    public_key: StrictStr = Field(
        ...,
        alias="publicKey",
        min_length=1,
        description="32-byte public key, base58 encoded",
    )
