"""
Registration domain service - Validate, persist, sign.

Pipeline (short-circuits on the first failed stage)
===================================================

    validate ──Err──> IncorrectInput
       │ Ok
    insert   ──Err──> UsernameAlreadyExists
       │ Ok
    sign     ──Err──> JwtGeneration
       │ Ok
    JwtToken

Validation itself accumulates: every field check runs before the pipeline
decides (see ``validation``). Persistence is called only with fully valid,
normalized input, and the token issuer only with a stored user id.

Infrastructure faults raised by collaborators propagate unchanged; they are
never converted into domain errors.
"""

import logging
from dataclasses import dataclass

from .errors import DomainError
from .ports import JwtToken, TokenIssuer, UserPersistence
from .result import Err, Result
from .validation import RegisterUser, to_result, validate

logger = logging.getLogger(__name__)


@dataclass
class UserService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: field validation, account
    persistence and session token issuance.
    """

    persistence: UserPersistence
    jwt_service: TokenIssuer

    async def register(
        self, username: str, email: str, password: str
    ) -> Result[JwtToken, DomainError]:
        """
        Register a new user and issue a session token.

        Args:
            username: Raw username (trimmed during validation)
            email: Raw email address (trimmed and lowercased during validation)
            password: Raw password (handed to persistence for hashing)

        Returns:
            Ok(JwtToken) on success, or Err with exactly one of
            IncorrectInput, UsernameAlreadyExists or JwtGeneration
        """
        validated = to_result(validate(RegisterUser(username, email, password)))
        if isinstance(validated, Err):
            logger.info("Registration rejected: invalid %s", validated.error.error.field)
            return validated
        user = validated.value

        inserted = await self.persistence.insert(user.username, user.email, user.password)
        if isinstance(inserted, Err):
            logger.info("Registration rejected: username %s already exists", user.username)
            return inserted
        user_id = inserted.value

        token = await self.jwt_service.generate_jwt_token(user_id)
        if isinstance(token, Err):
            return token

        logger.info("Registered user %s with id %s", user.username, user_id)
        return token
