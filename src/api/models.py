"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field syntax (email/phone format, name, password length) is checked by the
domain Validator, not here, so these models only enforce presence and type.
"""

from pydantic import AliasChoices, BaseModel, Field

MAX_CODE = 2**32 - 1

_IDENTIFIER_ALIASES = AliasChoices("identifier", "email_address", "phone_number")


class SendCodeRequest(BaseModel):
    """Request model for verification code issuance."""

    identifier: str = Field(
        ...,
        validation_alias=_IDENTIFIER_ALIASES,
        description="Email address or 11-digit phone number, depending on deployment",
    )


class RegisterRequest(BaseModel):
    """Request model for completing registration with a verification code."""

    identifier: str = Field(..., validation_alias=_IDENTIFIER_ALIASES)
    name: str = Field(..., description="ASCII alphanumeric display name")
    password: str
    code: int = Field(
        ...,
        ge=0,
        le=MAX_CODE,
        validation_alias=AliasChoices("code", "email_code", "sms_code"),
        description="6-digit verification code",
    )


class LoginRequest(BaseModel):
    """Request model for password login."""

    identifier: str = Field(..., validation_alias=_IDENTIFIER_ALIASES)
    password: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
