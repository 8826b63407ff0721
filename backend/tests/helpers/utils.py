"""Tiny helpers shared across test modules."""

from __future__ import annotations

import threading

from identity_registry.services._shared.ports import PlainTextPasswordHasher

PUBLIC_KEYS = {"id", "email", "username", "createdAt", "updatedAt"}


def assert_public_user(data: dict) -> None:
    """Ensure ``data`` is a public user body: exactly the public keys, no secrets.

    Parameters
    ----------
    data:
        JSON object under test.

    Raises
    ------
    AssertionError
        If keys are missing or any password material is present.
    """
    assert set(data) == PUBLIC_KEYS, f"Unexpected keys: {sorted(set(data) ^ PUBLIC_KEYS)}"
    assert "password" not in data
    assert "password_hash" not in data


class BarrierHasher(PlainTextPasswordHasher):
    """Hasher that holds every caller until ``parties`` callers are hashing.

    Forces concurrent registrations past the uniqueness lookup before any of
    them inserts, which is the window the atomic insert must close.
    """

    def __init__(self, parties: int, timeout: float = 5.0) -> None:
        super().__init__()
        self._barrier = threading.Barrier(parties, timeout=timeout)
        self._calls_lock = threading.Lock()

    def hash(self, raw: str) -> str:
        with self._calls_lock:
            self.calls += 1
        self._barrier.wait()
        return f"{self.PREFIX}{raw}"
