"""
JWT token issuer - Builds claims and delegates rendering to a Signer.

Signer failures arrive as SigningError subclasses and leave this module as a
single JwtGeneration error whose message names the failure kind. The full
cause is logged here because callers only ever see the generic detail.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .errors import JwtGeneration
from .exceptions import InvalidClaims, InvalidSigningKey, SigningError
from .ports import JwtToken, Signer, TokenClaims, UserId
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def describe_signing_error(error: SigningError) -> str:
    """Operator-facing message for a signer failure."""
    if isinstance(error, InvalidSigningKey):
        summary = "invalid secret key"
    elif isinstance(error, InvalidClaims):
        summary = "generated with incorrect JWT data"
    else:
        summary = "internal signer failure"

    cause = str(error)
    if cause:
        return f"JWT signing error: {summary}: {cause}"
    return f"JWT signing error: {summary}"


@dataclass
class JwtTokenIssuer:
    """
    Issues signed session tokens for stored accounts.

    Implements the TokenIssuer port. Issuer name and token lifetime come
    from configuration and do not change after construction.
    """

    signer: Signer
    issuer: str
    duration: timedelta
    clock: Callable[[], datetime] = field(default=_utc_now)

    def build_claims(self, user_id: UserId) -> TokenClaims:
        issued_at = self.clock()
        return TokenClaims(
            user_id=user_id,
            issuer=self.issuer,
            issued_at=issued_at,
            expires_at=issued_at + self.duration,
        )

    async def generate_jwt_token(self, user_id: UserId) -> Result[JwtToken, JwtGeneration]:
        """
        Generate a new token for user_id. Earlier tokens stay valid.

        Returns:
            Ok(JwtToken) on success, Err(JwtGeneration) if the signer failed
        """
        claims = self.build_claims(user_id)
        try:
            rendered = self.signer.sign(claims)
        except SigningError as e:
            error = JwtGeneration(describe_signing_error(e))
            logger.exception("Token signing failed for user %s: %s", user_id, error.message)
            return Err(error)
        return Ok(JwtToken(rendered))
