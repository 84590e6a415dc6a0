"""
Signer exceptions - Failure kinds a token signer may raise.

Signer adapters raise these; the token issuer translates each of them into
a JwtGeneration domain error. Anything else a signer raises is treated as an
infrastructure fault and propagates.
"""


class SigningError(Exception):
    """Base class for token signing failures."""

    pass


class InvalidSigningKey(SigningError):
    """The configured secret or key cannot be used for signing."""

    pass


class InvalidClaims(SigningError):
    """The claims payload could not be encoded."""

    pass


class SignerInternalError(SigningError):
    """The signing library failed for another reason."""

    pass
