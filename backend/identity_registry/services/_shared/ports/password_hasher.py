from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    Port for one-way, salted password hashing.

    Implementations are expected to be slow on purpose and safe to call from
    several threads at once.
    """

    def hash(self, raw: str) -> str: ...

    def verify(self, hashed: str, raw: str) -> bool: ...


class PlainTextPasswordHasher(PasswordHasher):
    """Deterministic, non-cryptographic hasher used in unit tests."""

    PREFIX = "plain$"

    def __init__(self) -> None:
        self.calls = 0

    def hash(self, raw: str) -> str:
        self.calls += 1
        return f"{self.PREFIX}{raw}"

    def verify(self, hashed: str, raw: str) -> bool:
        return hashed == f"{self.PREFIX}{raw}"
