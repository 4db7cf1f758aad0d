"""Listing API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace.api.dependencies import get_listing_service, get_requester_email
from marketplace.errors import ListingNotFoundError, NotAuthorizedError, UserNotFoundError
from marketplace.schemas.listing import ListingCreate, ListingView
from marketplace.services.listing_service import ListingService

router = APIRouter(prefix="/api/listings", tags=["listings"])


@router.get("", response_model=list[ListingView])
def get_listings(
    listing_service: Annotated[ListingService, Depends(get_listing_service)],
):
    """Get all listings."""
    return listing_service.list_all()


@router.post("", response_model=ListingView, status_code=status.HTTP_201_CREATED)
def create_listing(
    listing_data: ListingCreate,
    requester_email: Annotated[str, Depends(get_requester_email)],
    listing_service: Annotated[ListingService, Depends(get_listing_service)],
):
    """Create a new listing owned by the caller."""
    try:
        return listing_service.create(
            title=listing_data.title,
            description=listing_data.description,
            listing_type=listing_data.listing_type,
            price=listing_data.price,
            requester_email=requester_email,
        )
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_listing(
    listing_id: int,
    requester_email: Annotated[str, Depends(get_requester_email)],
    listing_service: Annotated[ListingService, Depends(get_listing_service)],
):
    """Delete a listing (seller only)."""
    try:
        listing_service.delete(listing_id, requester_email)
    except NotAuthorizedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from e
    except (ListingNotFoundError, UserNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
