"""
Unit tests for InMemoryUserPersistence adapter.

Tests verify serial id assignment and uniqueness on username and email.
"""

import pytest

from conduit.adapters.repository.memory import InMemoryUserPersistence
from conduit.domain.errors import UsernameAlreadyExists
from conduit.domain.result import Err, Ok


class TestInsert:
    """Tests for insert."""

    @pytest.mark.asyncio
    async def test_ids_are_serial_from_one(self, persistence: InMemoryUserPersistence) -> None:
        """Each stored user gets the next serial id."""
        first = await persistence.insert("alice", "alice@example.com", "password1")
        second = await persistence.insert("bob", "bob@example.com", "password2")

        assert first == Ok(1)
        assert second == Ok(2)
        assert len(persistence) == 2

    @pytest.mark.asyncio
    async def test_duplicate_username_is_conflict(
        self, persistence: InMemoryUserPersistence
    ) -> None:
        """A taken username is reported, not overwritten."""
        await persistence.insert("alice", "alice@example.com", "password1")
        result = await persistence.insert("alice", "other@example.com", "password2")

        assert result == Err(UsernameAlreadyExists("alice"))
        assert persistence.get("alice").email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_conflict(self, persistence: InMemoryUserPersistence) -> None:
        """A taken email is reported against the new username."""
        await persistence.insert("alice", "shared@example.com", "password1")
        result = await persistence.insert("bob", "shared@example.com", "password2")

        assert result == Err(UsernameAlreadyExists("bob"))
        assert persistence.get("bob") is None

    @pytest.mark.asyncio
    async def test_conflict_does_not_consume_id(self, persistence: InMemoryUserPersistence) -> None:
        """Rejected inserts leave the serial sequence untouched."""
        await persistence.insert("alice", "alice@example.com", "password1")
        await persistence.insert("alice", "alice@example.com", "password1")
        result = await persistence.insert("bob", "bob@example.com", "password2")

        assert result == Ok(2)

    def test_no_explicit_inheritance(self) -> None:
        """InMemoryUserPersistence uses structural subtyping, not inheritance."""
        assert InMemoryUserPersistence.__bases__ == (object,)
