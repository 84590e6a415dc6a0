"""
PostgreSQL persistence adapter - Implements UserPersistence protocol.

This module provides the PostgreSQL implementation of the domain's
persistence port using psycopg3's async connection pool with raw SQL.

Uniqueness:
-----------
The ``users`` table carries UNIQUE constraints on both ``username`` and
``email`` (see migrations/001_create_users.sql). Concurrent inserts for the
same identity are serialized by those constraints: exactly one INSERT
commits, every other one fails with ``UniqueViolation`` and is reported as
UsernameAlreadyExists. No application-level locking is involved.

Passwords:
----------
bcrypt only reads the first 72 bytes of its input, while valid passwords
may be up to 100 characters of any script. Each password is first reduced
to a base64 SHA-256 digest (44 ASCII bytes) so the whole password counts.

Any other database error (connectivity, missing table, ...) propagates to
the caller untouched.
"""

import asyncio
import base64
import hashlib
import logging

import bcrypt
from psycopg import errors
from psycopg_pool import AsyncConnectionPool

from conduit.domain.errors import UsernameAlreadyExists
from conduit.domain.ports import UserId
from conduit.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class PostgresUserPersistence:
    """
    Implements UserPersistence protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool, bcrypt_cost: int = 10) -> None:
        """
        Initialize persistence with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
            bcrypt_cost: bcrypt work factor used when hashing passwords
        """
        self._pool = pool
        self._bcrypt_cost = bcrypt_cost

    async def insert(
        self, username: str, email: str, password: str
    ) -> Result[UserId, UsernameAlreadyExists]:
        """
        Insert a new user row and return its serial id.

        The password is hashed with bcrypt in a worker thread so the event
        loop is not blocked by the work factor.

        Args:
            username: Normalized username
            email: Normalized email address
            password: Plaintext password

        Returns:
            Ok(UserId) if the row was inserted,
            Err(UsernameAlreadyExists) on any UNIQUE constraint violation
        """
        password_hash = await asyncio.to_thread(hash_password, password, self._bcrypt_cost)

        sql = """
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id
        """

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (username, email, password_hash))
                row = await cursor.fetchone()
                await conn.commit()
        except errors.UniqueViolation as e:
            logger.info(
                "Insert rejected for %s: %s", username, e.diag.constraint_name or "unique violation"
            )
            return Err(UsernameAlreadyExists(username))

        return Ok(UserId(row[0]))


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode()).digest())


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with bcrypt over its SHA-256 digest."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a hash produced by hash_password."""
    return bcrypt.checkpw(_prehash(password), password_hash.encode())
