"""
PyJWT signer adapter - Implements Signer protocol.

Renders TokenClaims as a compact JWS using PyJWT and translates library
failures into the domain's signer exceptions:

- empty secret, ``jwt.InvalidKeyError``    -> InvalidSigningKey
- payload not JSON-encodable              -> InvalidClaims
- unsupported algorithm, other PyJWTError -> SignerInternalError

The underlying PyJWT error is chained as ``__cause__``.
"""

import jwt

from conduit.domain.exceptions import InvalidClaims, InvalidSigningKey, SignerInternalError
from conduit.domain.ports import TokenClaims


class PyJWTSigner:
    """
    Implements Signer protocol via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, secret: str, algorithm: str = "HS512") -> None:
        self._secret = secret
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def sign(self, claims: TokenClaims) -> str:
        if not self._secret:
            raise InvalidSigningKey("secret key is empty")

        try:
            return jwt.encode(claims.to_payload(), self._secret, algorithm=self._algorithm)
        except jwt.InvalidKeyError as e:
            raise InvalidSigningKey(str(e)) from e
        except (TypeError, ValueError) as e:
            raise InvalidClaims(str(e)) from e
        except (jwt.PyJWTError, NotImplementedError) as e:
            raise SignerInternalError(str(e) or type(e).__name__) from e
