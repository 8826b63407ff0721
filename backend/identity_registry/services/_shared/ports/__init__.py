"""
identity_registry.services._shared.ports
========================================

Collection of *ports* (hexagonal interfaces) that define the contracts
for credential storage and password hashing.

These ports decouple the registration workflow from concrete
implementations of storage and hashing.

Modules
-------
- :mod:`credential_store`:
    Defines :class:`~.CredentialStore` (atomic compare-and-insert keyed by
    normalized email) and the process-local :class:`~.InMemoryCredentialStore`.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher` and the test-only
    :class:`~.PlainTextPasswordHasher`.

Design Notes
------------
Concrete adapters that need third-party libraries live under
``identity_registry.infra``.
"""

from __future__ import annotations

from .credential_store import CredentialStore, InMemoryCredentialStore
from .password_hasher import PasswordHasher, PlainTextPasswordHasher

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
    "PasswordHasher",
    "PlainTextPasswordHasher",
]
