"""
IdentityService
===============

Read-side service over registered identities:
- Enumerate public records in registration order.
- Look up a single public record by email.

Only public records ever leave this service; password hashes stay in the store.
"""

from __future__ import annotations

from identity_registry.services._shared.base import BaseService
from identity_registry.services._shared.errors import NotFoundError
from identity_registry.services._shared.policies.credentials import normalize
from identity_registry.services.identity.dto import UserPublicOut


class IdentityService(BaseService):
    """
    Application service for registered identities.

    Responsibilities
    ----------------
    - List all users without secrets.
    - Retrieve a user by (normalized) email.
    """

    def list_users(self) -> list[UserPublicOut]:
        """
        Return every registered user, oldest first.

        The store hands back a snapshot, so concurrent registrations either
        appear whole or not at all.

        :returns: Public-safe user DTOs.
        :rtype: list[UserPublicOut]
        """
        return [record.to_public() for record in self.store.list_all()]

    def get_by_email(self, email: str) -> UserPublicOut:
        """
        Retrieve a user by email.

        :param email: Email as typed; normalized before lookup.
        :type email: str
        :returns: Public-safe user DTO.
        :rtype: UserPublicOut
        :raises NotFoundError: If no user has that email.
        """
        key = normalize(email, True)
        record = self.store.find_by_email(key) if isinstance(key, str) else None
        if record is None:
            raise NotFoundError("User", str(key))
        return record.to_public()

    def count_users(self) -> int:
        """Return the number of registered users."""
        return self.store.count()
