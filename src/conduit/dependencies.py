"""
Dependency wiring - Builds production collaborators from settings.

This module creates the database connection pool, the persistence adapter
and the JWT service, and ties the pool's lifetime to an async context:

    async with dependencies() as deps:
        result = await deps.user_service.register(username, email, password)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from conduit.adapters.repository.postgres import PostgresUserPersistence
from conduit.adapters.signing.pyjwt import PyJWTSigner
from conduit.config.settings import Settings, get_settings
from conduit.domain.ports import TokenIssuer, UserPersistence
from conduit.domain.registration import UserService
from conduit.domain.tokens import JwtTokenIssuer

logger = logging.getLogger(__name__)


@dataclass
class Dependencies:
    """Collaborators the registration pipeline needs."""

    user_persistence: UserPersistence
    jwt_service: TokenIssuer

    @property
    def user_service(self) -> UserService:
        return UserService(persistence=self.user_persistence, jwt_service=self.jwt_service)


def build_jwt_service(settings: Settings) -> JwtTokenIssuer:
    """Create the JWT service from token settings."""
    signer = PyJWTSigner(settings.jwt_secret.get_secret_value(), settings.jwt_algorithm)
    return JwtTokenIssuer(
        signer=signer,
        issuer=settings.jwt_issuer,
        duration=settings.jwt_duration,
    )


@asynccontextmanager
async def dependencies(settings: Settings | None = None) -> AsyncIterator[Dependencies]:
    """
    Open the connection pool and yield wired dependencies.

    The pool is closed when the context exits, including on error.
    """
    settings = settings or get_settings()

    logger.info("Connecting to database...")
    pool = AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=False,
    )
    await pool.open()

    try:
        yield Dependencies(
            user_persistence=PostgresUserPersistence(pool, bcrypt_cost=settings.bcrypt_cost),
            jwt_service=build_jwt_service(settings),
        )
    finally:
        logger.info("Shutting down dependencies...")
        await pool.close()
        logger.info("Database connection pool closed")
