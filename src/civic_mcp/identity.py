"""
Bearer token -> user identity resolution.

``PlaceholderIdentityResolver`` does NOT verify anything: it hashes the token
into a stable pseudo-identity so that each token gets its own todo collection.
A resolver that checks the token signature against Civic's public keys can be
passed to ``create_app`` instead; routes and tools only see the resulting
``AuthenticatedUser``.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from .exceptions import AuthenticationInvalidError


@dataclass(frozen=True)
class AuthenticatedUser:
    """User context attached to an authenticated request."""

    id: str
    sub: str
    email: str = ""
    name: str = ""
    wallet_address: str = ""

    def summary(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "walletAddress": self.wallet_address}


class IdentityResolver(ABC):
    """Turns a bearer token into an :class:`AuthenticatedUser`."""

    @abstractmethod
    def resolve(self, token: str) -> AuthenticatedUser:
        """Raise :class:`AuthenticationInvalidError` when the token is unusable."""


class PlaceholderIdentityResolver(IdentityResolver):
    """Deterministic hash-of-token identity. Demo use only."""

    prefix = "civic_"

    def __init__(
        self,
        email: str = "user@civic.example.com",
        name: str = "Civic User",
        wallet_address: str = "0x1234...abcd",
    ):
        self.email = email
        self.name = name
        self.wallet_address = wallet_address

    def resolve(self, token: str) -> AuthenticatedUser:
        token = token.strip()
        if not token:
            raise AuthenticationInvalidError("The provided Civic Auth token is invalid")

        digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
        return AuthenticatedUser(
            id=f"{self.prefix}{digest[:16]}",
            sub=f"{self.prefix}sub_{digest[16:32]}",
            email=self.email,
            name=self.name,
            wallet_address=self.wallet_address,
        )
