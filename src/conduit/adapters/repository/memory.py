"""
In-memory persistence adapter - Implements UserPersistence protocol.

Keeps accounts in process memory. Used for tests and local wiring where no
database is available. Uniqueness mirrors the PostgreSQL schema: username
and email are each unique, and either conflict is reported as
UsernameAlreadyExists.

``insert`` never awaits between its uniqueness check and its write, so
concurrent coroutines on one event loop cannot both claim the same identity.
"""

import itertools
from dataclasses import dataclass

from conduit.domain.errors import UsernameAlreadyExists
from conduit.domain.ports import UserId
from conduit.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class StoredUser:
    user_id: UserId
    username: str
    email: str
    password: str


class InMemoryUserPersistence:
    """
    Implements UserPersistence protocol with dictionaries.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Passwords are stored as given; hashing is an adapter concern and this
    adapter never leaves the process.
    """

    def __init__(self) -> None:
        self._users: dict[str, StoredUser] = {}
        self._emails: set[str] = set()
        self._serials = itertools.count(1)

    async def insert(
        self, username: str, email: str, password: str
    ) -> Result[UserId, UsernameAlreadyExists]:
        if username in self._users or email in self._emails:
            return Err(UsernameAlreadyExists(username))

        user_id = UserId(next(self._serials))
        self._users[username] = StoredUser(user_id, username, email, password)
        self._emails.add(email)
        return Ok(user_id)

    def get(self, username: str) -> StoredUser | None:
        return self._users.get(username)

    def __len__(self) -> int:
        return len(self._users)
