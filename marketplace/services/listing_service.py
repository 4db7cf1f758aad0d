"""Listing service for browsing, creating and deleting listings."""

import logging

from marketplace.errors import ListingNotFoundError, NotAuthorizedError, UserNotFoundError
from marketplace.models.enums import ListingType
from marketplace.models.listing import Listing
from marketplace.models.mixins import utcnow
from marketplace.models.user import User
from marketplace.schemas.listing import ListingView
from marketplace.store import Store

logger = logging.getLogger(__name__)


def build_listing_view(listing: Listing, seller: User) -> ListingView:
    """Project a listing and its seller into the public view."""
    return ListingView(
        id=listing.id,
        title=listing.title,
        description=listing.description,
        listing_type=listing.listing_type,
        price=listing.price,
        created_at=listing.created_at,
        seller_name=seller.display_name,
        seller_phone_number=seller.phone_number,
        seller_email=seller.email,
    )


class ListingService:
    """Service for listing-related operations."""

    def __init__(self, store: Store):
        self.store = store

    def _get_user_by_email(self, email: str) -> User:
        user = self.store.find_user_by_email(email)
        if user is None:
            raise UserNotFoundError(f"User not found for email: {email}")
        return user

    def list_all(self) -> list[ListingView]:
        """Get every listing with its seller's contact details."""
        sellers: dict[int, User] = {}
        views = []
        for listing in self.store.list_all_listings():
            seller = sellers.get(listing.seller_id)
            if seller is None:
                seller = self.store.find_user_by_id(listing.seller_id)
                if seller is None:
                    # The foreign key makes this unreachable short of manual edits
                    logger.error(f"Listing {listing.id} has missing seller {listing.seller_id}")
                    continue
                sellers[listing.seller_id] = seller
            views.append(build_listing_view(listing, seller))
        return views

    def create(
        self,
        title: str,
        description: str,
        listing_type: ListingType,
        price: float,
        requester_email: str,
    ) -> ListingView:
        """Create a listing owned by the requester."""
        seller = self._get_user_by_email(requester_email)

        listing = Listing(
            title=title,
            description=description,
            listing_type=listing_type,
            price=price,
            seller_id=seller.id,
            created_at=utcnow(),
        )
        listing = self.store.save_listing(listing)
        logger.info(f"User {seller.id} created listing {listing.id}")
        return build_listing_view(listing, seller)

    def delete(self, listing_id: int, requester_email: str) -> None:
        """Delete a listing on behalf of its seller.

        Checks run in a fixed order: requester exists, listing exists, then
        requester owns listing.
        """
        user = self._get_user_by_email(requester_email)

        listing = self.store.find_listing_by_id(listing_id)
        if listing is None:
            raise ListingNotFoundError()

        if listing.seller_id != user.id:
            logger.warning(f"User {user.id} denied deleting listing {listing.id}")
            raise NotAuthorizedError()

        self.store.delete_listing(listing)
        logger.info(f"User {user.id} deleted listing {listing.id}")
