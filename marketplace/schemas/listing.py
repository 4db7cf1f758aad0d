"""Listing schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from marketplace.models.enums import ListingType


class ListingCreate(BaseModel):
    """Create a new listing."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    listing_type: ListingType
    # Negative prices are accepted; no bound is enforced
    price: float = Field(..., allow_inf_nan=False)


class ListingView(BaseModel):
    """Listing as shown to every user, with the seller's contact details."""

    id: int
    title: str
    description: str
    listing_type: ListingType
    price: float
    created_at: datetime
    seller_name: str
    seller_phone_number: str
    seller_email: str
