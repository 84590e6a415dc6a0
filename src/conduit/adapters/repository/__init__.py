"""Persistence adapters - Database and in-memory implementations."""

from .memory import InMemoryUserPersistence, StoredUser
from .postgres import PostgresUserPersistence

__all__ = ["InMemoryUserPersistence", "PostgresUserPersistence", "StoredUser"]
