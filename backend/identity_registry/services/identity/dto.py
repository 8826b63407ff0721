"""
DTOs for IdentityService.

Data Transfer Objects (DTOs) isolate the service layer from storage details,
ensuring clear input/output contracts and type safety.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

# --------------------------------------------------------------------------- #
# Stored record
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """
    Full stored representation of a registered identity.

    Never returned across the service boundary; use :meth:`to_public`.

    :param id: Opaque identifier generated at creation.
    :type id: :class:`uuid.UUID`
    :param email: Normalized email (trimmed, collapsed, lower-cased). Unique.
    :type email: str
    :param username: Normalized username (trimmed, collapsed).
    :type username: str
    :param password_hash: One-way salted hash of the submitted password.
    :type password_hash: str
    :param created_at: Creation timestamp (UTC).
    :type created_at: datetime
    :param updated_at: Last update timestamp (UTC); equals ``created_at``.
    :type updated_at: datetime
    """

    id: UUID
    email: str
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> UserPublicOut:
        """Return the record without its password hash."""
        return UserPublicOut(
            id=self.id,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"CredentialRecord(id={self.id!s}, email={self.email!r})"


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Public-safe user representation.

    :param id: User identifier.
    :type id: :class:`uuid.UUID`
    :param email: Normalized email.
    :type email: str
    :param username: Normalized username.
    :type username: str
    :param created_at: Creation timestamp.
    :type created_at: datetime
    :param updated_at: Last update timestamp.
    :type updated_at: datetime
    """

    id: UUID
    email: str
    username: str
    created_at: datetime
    updated_at: datetime
