"""Domain errors raised by the store and services.

Routers translate these into HTTP responses; nothing below the request layer
knows about status codes.
"""


class MarketplaceError(Exception):
    """Base exception for marketplace failures."""

    default_message = "Marketplace error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmailError(MarketplaceError):
    """A user with this email (compared case-insensitively) already exists."""

    default_message = "Email already exists"


class InvalidCredentialsError(MarketplaceError):
    """Unknown email or wrong password. Deliberately does not say which."""

    default_message = "Invalid credentials"


class UserNotFoundError(MarketplaceError):
    """The identity token does not match any registered user."""

    default_message = "User not found"


class ListingNotFoundError(MarketplaceError):
    default_message = "Listing not found"


class NotAuthorizedError(MarketplaceError):
    """The listing exists but the requester is not its seller."""

    default_message = "User not authorized to delete this listing"
