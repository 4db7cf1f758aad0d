"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)
    phone_number: str = Field(..., min_length=1, max_length=50)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    created_at: datetime


class RegisterResponse(BaseModel):
    """Confirmation that a user was registered."""

    message: str = "User registered successfully!"
    user: UserResponse


class LoginResponse(BaseModel):
    """Identity token to send back on authenticated calls.

    The token is the user's email; it carries no signature or expiry.
    """

    identity_token: str
    user: UserResponse
