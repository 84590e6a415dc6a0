"""
Domain errors - Typed failure values for the registration pipeline.

Every expected failure of a registration attempt is one of three variants:

- IncorrectInput: a field failed validation (wraps one ValidationError)
- UsernameAlreadyExists: storage reported a uniqueness conflict
- JwtGeneration: the token could not be signed

These are values returned inside ``Err``, not exceptions. Infrastructure
faults (database connectivity, programming errors) are never represented
here; they propagate as ordinary exceptions.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ValidationError:
    """Base for per-field validation failures."""

    field: ClassVar[str]

    errors: tuple[str, ...]

    def __init__(self, errors: Sequence[str]) -> None:
        if isinstance(errors, str):
            errors = (errors,)
        if not errors:
            raise ValueError(f"{type(self).__name__} requires at least one message")
        object.__setattr__(self, "errors", tuple(errors))

    @property
    def detail(self) -> str:
        return f"{self.field}: {', '.join(self.errors)}"


@dataclass(frozen=True, init=False)
class InvalidUsername(ValidationError):
    field: ClassVar[str] = "username"


@dataclass(frozen=True, init=False)
class InvalidEmail(ValidationError):
    field: ClassVar[str] = "email"


@dataclass(frozen=True, init=False)
class InvalidPassword(ValidationError):
    field: ClassVar[str] = "password"


@dataclass(frozen=True)
class IncorrectInput:
    """Registration input was rejected; carries the reported field error."""

    error: ValidationError

    @property
    def detail(self) -> str:
        return self.error.detail


@dataclass(frozen=True)
class UsernameAlreadyExists:
    """Storage already holds an account that conflicts with this username."""

    username: str

    @property
    def detail(self) -> str:
        return f"Username {self.username} already exists"


@dataclass(frozen=True)
class JwtGeneration:
    """
    Token signing failed.

    ``message`` names the signer failure and its cause; it is meant for
    operators. Callers should be shown ``detail`` only.
    """

    message: str

    @property
    def detail(self) -> str:
        return "Unable to generate token"


UserError = UsernameAlreadyExists

DomainError = IncorrectInput | UserError | JwtGeneration
