"""Resolution of the caller's identity token from a request."""

from abc import ABC, abstractmethod

from fastapi import Request


class IdentityResolver(ABC):
    """Extracts the requester's email from an incoming request."""

    @abstractmethod
    def resolve(self, request: Request) -> str | None:
        """Return the claimed email, or None if the request carries none."""


class HeaderIdentityResolver(IdentityResolver):
    """Reads the email verbatim from a request header.

    The header value is trusted as-is: there is no signature, expiry or
    server-side session behind it.
    """

    def __init__(self, header_name: str = "X-User-Email"):
        self.header_name = header_name

    def resolve(self, request: Request) -> str | None:
        value = request.headers.get(self.header_name)
        if value is None or not value.strip():
            return None
        return value.strip()
