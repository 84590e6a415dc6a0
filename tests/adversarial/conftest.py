"""
Shared fixtures for adversarial tests.

Provides the service under attack, wired to PostgreSQL. The pool fixture
comes from the top-level conftest.
"""

from datetime import timedelta

import pytest
from psycopg_pool import AsyncConnectionPool

from conduit.adapters.repository.postgres import PostgresUserPersistence
from conduit.adapters.signing.pyjwt import PyJWTSigner
from conduit.domain.registration import UserService
from conduit.domain.tokens import JwtTokenIssuer

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

ATTACK_SECRET = "adversarial-signing-secret-" + "a" * 64


@pytest.fixture
def service(pool: AsyncConnectionPool) -> UserService:
    """Create a fresh service for each test."""
    return UserService(
        persistence=PostgresUserPersistence(pool, bcrypt_cost=4),
        jwt_service=JwtTokenIssuer(
            signer=PyJWTSigner(ATTACK_SECRET),
            issuer="AdversarialIssuer",
            duration=timedelta(minutes=5),
        ),
    )
