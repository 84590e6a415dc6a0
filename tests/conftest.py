"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Signer stubs and token issuers
- In-memory persistence
- PostgreSQL connection pool with per-test cleanup (skipped when no
  database is reachable)
"""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import psycopg
import pytest
import pytest_asyncio
from psycopg_pool import AsyncConnectionPool

from conduit.adapters.repository.memory import InMemoryUserPersistence
from conduit.config.settings import get_settings
from conduit.domain.ports import TokenClaims
from conduit.domain.tokens import JwtTokenIssuer

TEST_ISSUER = "TestIssuer"
FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

MIGRATION_FILE = Path(__file__).resolve().parent.parent / "migrations" / "001_create_users.sql"


class StubSigner:
    """Signer that returns a fixed token or raises a configured error."""

    def __init__(self, token: str = "signed.token.value", error: Exception | None = None) -> None:
        self.token = token
        self.error = error
        self.calls: list[TokenClaims] = []

    def sign(self, claims: TokenClaims) -> str:
        self.calls.append(claims)
        if self.error is not None:
            raise self.error
        return self.token


@pytest.fixture
def signer() -> StubSigner:
    """Signer stub that always succeeds."""
    return StubSigner()


@pytest.fixture
def failing_signer():
    """Factory for signer stubs that raise the given error."""

    def _make(error: Exception) -> StubSigner:
        return StubSigner(error=error)

    return _make


@pytest.fixture
def make_issuer():
    """Factory for token issuers around a given signer."""

    def _make(signer, duration: timedelta = timedelta(days=30)) -> JwtTokenIssuer:
        return JwtTokenIssuer(
            signer=signer,
            issuer=TEST_ISSUER,
            duration=duration,
            clock=lambda: FIXED_NOW,
        )

    return _make


@pytest.fixture
def persistence() -> InMemoryUserPersistence:
    """Fresh in-memory persistence for each test."""
    return InMemoryUserPersistence()


@pytest.fixture(scope="session")
def database_url() -> str:
    """Database URL with the users table created, or skip if unreachable."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=3) as conn:
            conn.execute(MIGRATION_FILE.read_text())
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return settings.database_url


@pytest_asyncio.fixture
async def pool(database_url: str) -> AsyncIterator[AsyncConnectionPool]:
    """Connection pool over a freshly truncated users table."""
    pool = AsyncConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=False)
    await pool.open(wait=True)
    async with pool.connection() as conn:
        await conn.execute("TRUNCATE users RESTART IDENTITY")
    yield pool
    await pool.close()
