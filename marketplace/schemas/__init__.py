"""Pydantic schemas for API requests and responses."""

from marketplace.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from marketplace.schemas.listing import ListingCreate, ListingView

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "ListingCreate",
    "ListingView",
]
