"""Listing model."""

from sqlalchemy import Column, Enum, Float, ForeignKey, Integer, String

from marketplace.database import Base
from marketplace.models.enums import ListingType
from marketplace.models.mixins import CreatedAtMixin


class Listing(Base, CreatedAtMixin):
    """An item offered for sale or rent by its seller."""

    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=False)
    listing_type = Column(Enum(ListingType, name="listing_type"), nullable=False)
    price = Column(Float, nullable=False)
    # Seller is resolved explicitly through the store, not via a relationship
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
