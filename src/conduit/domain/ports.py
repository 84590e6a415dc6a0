"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the registration pipeline
requires from infrastructure, plus the small value types that cross them.
Adapters implement these protocols structurally.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NewType, Protocol

from .errors import JwtGeneration, UsernameAlreadyExists
from .result import Result

UserId = NewType("UserId", int)


@dataclass(frozen=True)
class JwtToken:
    """Opaque signed token handed to the caller."""

    value: str


@dataclass(frozen=True)
class TokenClaims:
    """Claims embedded in a session token."""

    user_id: UserId
    issuer: str
    issued_at: datetime
    expires_at: datetime

    def to_payload(self) -> dict[str, Any]:
        """Registered JWT claim names plus the ``id`` claim for the user."""
        return {
            "id": self.user_id,
            "iss": self.issuer,
            "iat": self.issued_at,
            "exp": self.expires_at,
        }


class UserPersistence(Protocol):
    """Port interface for account storage."""

    async def insert(
        self, username: str, email: str, password: str
    ) -> Result[UserId, UsernameAlreadyExists]:
        """
        Store a new account.

        Args:
            username: Normalized username
            email: Normalized email address
            password: Plaintext password (the adapter decides how to hash it)

        Returns:
            Ok(UserId) for the new account, or Err(UsernameAlreadyExists) if
            storage rejected the account as a duplicate.

        Any other storage failure is raised, not returned.
        """
        ...


class Signer(Protocol):
    """Port interface for rendering signed tokens."""

    def sign(self, claims: TokenClaims) -> str:
        """
        Render the claims as a signed token string.

        Raises:
            InvalidSigningKey: The configured key is unusable
            InvalidClaims: The claims cannot be encoded
            SignerInternalError: Any other signer-side failure
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for issuing a session token to a stored account."""

    async def generate_jwt_token(self, user_id: UserId) -> Result[JwtToken, JwtGeneration]:
        """Issue a new token for user_id. Does not invalidate earlier tokens."""
        ...
