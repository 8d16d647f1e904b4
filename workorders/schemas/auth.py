"""Auth API schemas."""

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    """Login body. Email is matched case-insensitively."""

    email: str = Field(..., min_length=3, max_length=320, examples=["alice@example.com"])
    password: str = Field(..., min_length=8, max_length=256)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class TokenResponse(BaseModel):
    """Bearer token issued by /auth/login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
