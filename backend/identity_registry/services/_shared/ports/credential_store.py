from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Protocol

from identity_registry.services._shared.errors import DuplicateIdentityError
from identity_registry.services.identity.dto import CredentialRecord


class CredentialStore(Protocol):
    """
    Source of truth for registered identities.

    ``insert`` MUST be an atomic compare-and-insert keyed by the normalized
    email: it either stores the record or raises
    :class:`DuplicateIdentityError`, never both and never neither.
    """

    def find_by_email(self, email: str) -> CredentialRecord | None:
        """Return the record stored under the exact normalized ``email``."""

    def insert(self, record: CredentialRecord) -> CredentialRecord:
        """
        Store ``record`` unless its email is already taken.

        :returns: The stored record, unchanged.
        :raises DuplicateIdentityError: When the email key already exists.
        """

    def list_all(self) -> Sequence[CredentialRecord]:
        """Return a point-in-time snapshot of all records, in insertion order."""

    def count(self) -> int:
        """Return the number of stored records."""


class InMemoryCredentialStore(CredentialStore):
    """
    Process-lifetime credential store.

    .. note::
       A single lock guards both the email index and the ordered list, so
       lookups, inserts and snapshots never observe one without the other.
    """

    def __init__(self) -> None:
        self._by_email: dict[str, CredentialRecord] = {}
        self._ordered: list[CredentialRecord] = []
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> CredentialRecord | None:
        with self._lock:
            return self._by_email.get(email)

    def insert(self, record: CredentialRecord) -> CredentialRecord:
        with self._lock:
            if record.email in self._by_email:
                raise DuplicateIdentityError(record.email)
            self._by_email[record.email] = record
            self._ordered.append(record)
            return record

    def list_all(self) -> tuple[CredentialRecord, ...]:
        with self._lock:
            return tuple(self._ordered)

    def count(self) -> int:
        with self._lock:
            return len(self._ordered)
