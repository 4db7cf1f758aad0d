"""Authentication service for registration and password handling."""

import logging

from passlib.context import CryptContext

from marketplace.errors import DuplicateEmailError, InvalidCredentialsError
from marketplace.models.mixins import utcnow
from marketplace.models.user import User
from marketplace.store import Store

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Bcrypt hashing with a configurable work factor."""

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        """Spend the time of a real verification without a stored hash."""
        self.context.dummy_verify()


class AuthService:
    """Service for user registration and login."""

    def __init__(self, store: Store, password_hasher: PasswordHasher | None = None):
        self.store = store
        self.password_hasher = password_hasher or PasswordHasher()

    def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        phone_number: str,
    ) -> User:
        """Create a new user.

        Raises DuplicateEmailError if the email is taken, ignoring case. The
        store's unique index catches registrations that race past the check.
        """
        email = email.strip()
        if self.store.find_user_by_email(email) is not None:
            raise DuplicateEmailError()

        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=self.password_hasher.hash(password),
            phone_number=phone_number,
            created_at=utcnow(),
        )
        user = self.store.save_user(user)
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Authenticate a user by email and password.

        Raises InvalidCredentialsError for an unknown email or a wrong
        password alike.
        """
        user = self.store.find_user_by_email(email)
        if user is None:
            self.password_hasher.dummy_verify()
            logger.info("Login failed")
            raise InvalidCredentialsError()
        if not self.password_hasher.verify(password, user.password_hash):
            logger.info("Login failed")
            raise InvalidCredentialsError()
        return user
