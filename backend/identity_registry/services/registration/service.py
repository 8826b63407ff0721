"""
UserRegistrationService
=======================

Process-level service that registers a new identity:

- Normalizes and validates the candidate details in a fixed order
  (username, email, password).
- Rejects already-registered emails with a cheap lookup, hashes the password
  outside any lock, then stores the record through the store's atomic
  compare-and-insert so concurrent registrations of one email yield exactly
  one record.
- Allows post-insert side-effects via a callback.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import uuid4

from identity_registry.services._shared.base import BaseService
from identity_registry.services._shared.errors import (
    DuplicateIdentityError,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidUsernameError,
    MissingFieldError,
    RegistrationError,
)
from identity_registry.services._shared.policies.credentials import (
    is_blank,
    is_valid_email,
    is_valid_password,
    is_valid_username,
    normalize,
)
from identity_registry.services.identity.dto import CredentialRecord, UserPublicOut
from identity_registry.services.registration.dto import (
    PreparedRegistration,
    UserRegistrationIn,
)

log = logging.getLogger(__name__)

OnCommitted = Callable[[UserPublicOut], None]


def prepare_registration(dto: UserRegistrationIn) -> PreparedRegistration:
    """
    Normalize and validate raw registration input.

    Checks run in a fixed order and stop at the first failure: required
    fields, username, email, password. Transports that pre-validate must
    call this (or replicate the order) so the same message surfaces.

    :param dto: Raw registration input.
    :type dto: :class:`UserRegistrationIn`
    :returns: Normalized payload; the password is passed through untouched.
    :rtype: :class:`PreparedRegistration`
    :raises MissingFieldError: When a field is absent or blank.
    :raises InvalidUsernameError: When the username is malformed.
    :raises InvalidEmailError: When the email is malformed.
    :raises InvalidPasswordError: When the password is too weak.
    """
    email = normalize(dto.email, True)
    username = normalize(dto.username)
    password = dto.password

    if is_blank(email) or is_blank(username) or is_blank(password):
        raise MissingFieldError()
    if not is_valid_username(username):
        raise InvalidUsernameError()
    if not is_valid_email(email):
        raise InvalidEmailError()
    if not is_valid_password(password):
        raise InvalidPasswordError()

    return PreparedRegistration(email=email, username=username, password=password)


class UserRegistrationService(BaseService):
    """
    Orchestrates the user registration process.
    """

    def register(
        self,
        dto: UserRegistrationIn,
        *,
        on_committed: OnCommitted | None = None,
    ) -> UserPublicOut:
        """
        Register a user and return its public record.

        :param dto: Registration input.
        :type dto: :class:`UserRegistrationIn`
        :param on_committed: Optional callback executed **after** the insert.
        :type on_committed: Callable[[UserPublicOut], None] | None
        :returns: Public-safe record.
        :rtype: :class:`UserPublicOut`
        :raises RegistrationError: Any of the input or duplicate errors.
        """
        try:
            prepared = self._admit(dto)
            # Hashing is deliberately slow; it runs before the store lock is taken.
            password_hash = self.hasher.hash(prepared.password)
            return self._commit(prepared, password_hash, on_committed)
        except RegistrationError as exc:
            self._log_rejection(exc)
            raise

    async def register_async(
        self,
        dto: UserRegistrationIn,
        *,
        on_committed: OnCommitted | None = None,
    ) -> UserPublicOut:
        """
        Coroutine variant of :meth:`register`.

        The hash is computed on :attr:`hash_executor` so the event loop keeps
        serving other registrations meanwhile.
        """
        try:
            prepared = self._admit(dto)
            loop = asyncio.get_running_loop()
            password_hash = await loop.run_in_executor(
                self.hash_executor, self.hasher.hash, prepared.password
            )
            return self._commit(prepared, password_hash, on_committed)
        except RegistrationError as exc:
            self._log_rejection(exc)
            raise

    # ------------------------------------------------------------------ #
    # Steps
    # ------------------------------------------------------------------ #

    def _admit(self, dto: UserRegistrationIn) -> PreparedRegistration:
        """Validate input and reject known emails before any hashing."""
        prepared = prepare_registration(dto)
        if self.store.find_by_email(prepared.email) is not None:
            raise DuplicateIdentityError(prepared.email)
        return prepared

    def _commit(
        self,
        prepared: PreparedRegistration,
        password_hash: str,
        on_committed: OnCommitted | None,
    ) -> UserPublicOut:
        """Build the record and store it atomically."""
        now = datetime.now(UTC)
        record = CredentialRecord(
            id=uuid4(),
            email=prepared.email,
            username=prepared.username,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        try:
            stored = self.store.insert(record)
        except DuplicateIdentityError:
            # Another registration for this email won between lookup and insert.
            log.warning("registration.duplicate_race", extra=self._log_extra())
            raise

        result = stored.to_public()
        log.info("registration.succeeded", extra=self._log_extra(user_id=str(result.id)))

        # Post-insert side-effects (only after the record is visible)
        if callable(on_committed):
            try:
                on_committed(result)
            except Exception:
                log.exception(
                    "registration.callback_failed", extra=self._log_extra(user_id=str(result.id))
                )

        return result

    def _log_rejection(self, exc: RegistrationError) -> None:
        log.info("registration.rejected", extra=self._log_extra(code=exc.code))

    def _log_extra(self, **fields: str) -> dict[str, str | None]:
        return {
            "request_id": self.ctx.request_id,
            "remote_addr": self.ctx.remote_addr,
            **fields,
        }
