"""User model."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from marketplace.database import Base
from marketplace.models.mixins import CreatedAtMixin

EMAIL_UNIQUE_CONSTRAINT = "uq_users_normalized_email"


def normalize_email(email: str) -> str:
    """Normalize an email for identity comparison."""
    return email.strip().lower()


class User(Base, CreatedAtMixin):
    """Registered marketplace user; sells listings and logs in by email."""

    __tablename__ = "users"
    # One account per email regardless of case
    __table_args__ = (UniqueConstraint("normalized_email", name=EMAIL_UNIQUE_CONSTRAINT),)

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)  # As registered
    # Folded in Python, not by the database's lower(), so every backend agrees
    normalized_email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
