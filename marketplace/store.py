"""Persistence for users and listings.

``Store`` is the contract the services depend on; ``SqlAlchemyStore`` backs it
with a relational database. Every call runs in its own session and
transaction, and returned objects are detached from that session.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from marketplace.errors import DuplicateEmailError, ListingNotFoundError
from marketplace.models.listing import Listing
from marketplace.models.user import EMAIL_UNIQUE_CONSTRAINT, User, normalize_email

logger = logging.getLogger(__name__)


def is_email_conflict(error: IntegrityError) -> bool:
    """Whether an insert failed on the email uniqueness constraint."""
    # PostgreSQL reports the constraint name, SQLite the constrained column
    message = str(error.orig)
    return EMAIL_UNIQUE_CONSTRAINT in message or "users.normalized_email" in message


class Store(ABC):
    """CRUD operations on users and listings."""

    @abstractmethod
    def find_user_by_email(self, email: str) -> User | None:
        """Find a user by email, ignoring case."""

    @abstractmethod
    def save_user(self, user: User) -> User:
        """Persist a user, assigning its id if new.

        Raises DuplicateEmailError if another user already has the email.
        """

    @abstractmethod
    def find_user_by_id(self, user_id: int) -> User | None: ...

    @abstractmethod
    def list_all_listings(self) -> list[Listing]:
        """All listings in creation order."""

    @abstractmethod
    def save_listing(self, listing: Listing) -> Listing: ...

    @abstractmethod
    def find_listing_by_id(self, listing_id: int) -> Listing | None: ...

    @abstractmethod
    def delete_listing(self, listing: Listing) -> None: ...


class SqlAlchemyStore(Store):
    """Store backed by SQLAlchemy sessions from the given factory."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def find_user_by_email(self, email: str) -> User | None:
        with self.session_factory() as db:
            return (
                db.query(User).filter(User.normalized_email == normalize_email(email)).first()
            )

    def save_user(self, user: User) -> User:
        user.normalized_email = normalize_email(user.email)
        with self.session_factory() as db:
            db.add(user)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                if not is_email_conflict(e):
                    raise
                logger.info(f"Rejected duplicate email on insert: {user.email}")
                raise DuplicateEmailError() from e
            db.refresh(user)
            return user

    def find_user_by_id(self, user_id: int) -> User | None:
        with self.session_factory() as db:
            return db.get(User, user_id)

    def list_all_listings(self) -> list[Listing]:
        with self.session_factory() as db:
            return db.query(Listing).order_by(Listing.created_at, Listing.id).all()

    def save_listing(self, listing: Listing) -> Listing:
        with self.session_factory() as db:
            db.add(listing)
            db.commit()
            db.refresh(listing)
            return listing

    def find_listing_by_id(self, listing_id: int) -> Listing | None:
        with self.session_factory() as db:
            return db.get(Listing, listing_id)

    def delete_listing(self, listing: Listing) -> None:
        with self.session_factory() as db:
            # Delete by id so a concurrent delete surfaces as not-found
            deleted = db.query(Listing).filter(Listing.id == listing.id).delete()
            db.commit()
        if deleted == 0:
            raise ListingNotFoundError()
