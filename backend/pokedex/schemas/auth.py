"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator

from pokedex.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(
        ...,
        min_length=3,
        max_length=30,
        description="Unique username (3-30 characters, case-sensitive)"
    )
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="User password (6-72 characters)"
    )

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class AuthResponse(BaseModel):
    """Register/login response with the issued token."""
    message: str = Field(..., description="Outcome message")
    token: str = Field(..., description="JWT bearer token, valid for 7 days")
    user: UserResponse
