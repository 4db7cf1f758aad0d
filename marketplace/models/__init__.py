"""SQLAlchemy models."""

from marketplace.models.enums import ListingType
from marketplace.models.listing import Listing
from marketplace.models.user import User

__all__ = [
    "User",
    "Listing",
    "ListingType",
]
