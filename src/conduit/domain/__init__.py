"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration pipeline: field validation, the
domain error model, token issuance and the orchestrating service. It defines
its own port interfaces for infrastructure abstraction, ensuring true
hexagonal architecture decoupling.
"""

from .errors import (
    DomainError,
    IncorrectInput,
    InvalidEmail,
    InvalidPassword,
    InvalidUsername,
    JwtGeneration,
    UserError,
    UsernameAlreadyExists,
    ValidationError,
)
from .exceptions import InvalidClaims, InvalidSigningKey, SignerInternalError, SigningError
from .ports import JwtToken, Signer, TokenClaims, TokenIssuer, UserId, UserPersistence
from .registration import UserService
from .result import Err, Ok, Result
from .tokens import JwtTokenIssuer
from .validation import Invalid, RegisterUser, Valid, ValidationOutcome, to_result, validate

__all__ = [
    "DomainError",
    "Err",
    "IncorrectInput",
    "Invalid",
    "InvalidClaims",
    "InvalidEmail",
    "InvalidPassword",
    "InvalidSigningKey",
    "InvalidUsername",
    "JwtGeneration",
    "JwtToken",
    "JwtTokenIssuer",
    "Ok",
    "RegisterUser",
    "Result",
    "Signer",
    "SignerInternalError",
    "SigningError",
    "TokenClaims",
    "TokenIssuer",
    "UserError",
    "UserId",
    "UserPersistence",
    "UserService",
    "UsernameAlreadyExists",
    "Valid",
    "ValidationError",
    "ValidationOutcome",
    "to_result",
    "validate",
]
