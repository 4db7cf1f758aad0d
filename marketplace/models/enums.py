"""Enums for model fields."""

from enum import Enum


class ListingType(str, Enum):
    """Whether a listing offers the item for sale or for rent."""

    SALE = "SALE"
    RENTAL = "RENTAL"
