"""FastAPI dependencies for services and caller identity."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from marketplace.api.identity import IdentityResolver
from marketplace.services.auth import AuthService
from marketplace.services.listing_service import ListingService


def get_auth_service(request: Request) -> AuthService:
    """Get the auth service built at startup."""
    return request.app.state.auth_service


def get_listing_service(request: Request) -> ListingService:
    """Get the listing service built at startup."""
    return request.app.state.listing_service


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


def get_requester_email(
    request: Request,
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
) -> str:
    """Get the email the caller claims to act as."""
    email = resolver.resolve(request)
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing identity token",
        )
    return email
