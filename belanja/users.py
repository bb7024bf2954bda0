"""User accounts keyed by username."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional


class UserError(Exception):
    """Raised when registration or login fails."""


class UserTable:
    """Maps usernames to passwords."""

    def __init__(self, users: Optional[Mapping[str, str] | Iterable[tuple[str, str]]] = None) -> None:
        self._users: dict[str, str] = dict(users or {})

    def register(self, username: str, password: str) -> None:
        """Add a new user; fail if the username is taken."""
        if username in self._users:
            raise UserError("Username sudah terdaftar.")
        self._users[username] = password

    def verify(self, username: str, password: str) -> bool:
        """Check credentials, raising UserError on unknown user or wrong password."""
        try:
            stored = self._users[username]
        except KeyError:
            raise UserError("Username tidak ditemukan.") from None
        if stored != password:
            raise UserError("Password salah.")
        return True

    def set(self, username: str, password: str) -> None:
        """Store a user, replacing any existing entry."""
        self._users[username] = password

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._users.items())

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __iter__(self) -> Iterator[str]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)