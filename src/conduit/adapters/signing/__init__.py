"""Token signing adapters."""

from .pyjwt import PyJWTSigner

__all__ = ["PyJWTSigner"]
