# identity_registry/services/_shared/base.py
from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass

from identity_registry.core import errors as api_errors
from identity_registry.services._shared.errors import (
    ConflictError,
    NotFoundError,
    RegistrationError,
    ServiceError,
    StorageUnavailableError,
)
from identity_registry.services._shared.ports import CredentialStore, PasswordHasher


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (request ids, client hints).

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Client address as seen by the transport, if any.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Resolve the credential store and password hasher (injected or app-bound).
    * Centralize error translation.
    * Keep services thin, orchestration-only, no web leakage.

    Notes
    -----
    - When no collaborator is injected, the ones bound to the current Flask
      application by :mod:`identity_registry.core.extensions` are used.
    - Validation rules live in ``services/_shared/policies``.
    """

    def __init__(
        self,
        *,
        store: CredentialStore | None = None,
        hasher: PasswordHasher | None = None,
        hash_executor: Executor | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param store: Credential store; defaults to the app-bound store.
        :type store: CredentialStore | None
        :param hasher: Password hasher; defaults to the app-bound hasher.
        :type hasher: PasswordHasher | None
        :param hash_executor: Executor used by async callers to run hashing;
            defaults to the app-bound pool, or the event loop default outside an app.
        :type hash_executor: concurrent.futures.Executor | None
        :param ctx: Optional request-scoped context.
        :type ctx: ServiceContext | None
        """
        from identity_registry.core import extensions

        self.store = store if store is not None else extensions.get_store()
        self._hasher = hasher
        self._hash_executor = hash_executor
        self.ctx = ctx or ServiceContext()

    @property
    def hasher(self) -> PasswordHasher:
        """Return the password hasher, resolving the app-bound one lazily."""
        if self._hasher is None:
            from identity_registry.core import extensions

            self._hasher = extensions.get_hasher()
        return self._hasher

    @property
    def hash_executor(self) -> Executor | None:
        """Return the hashing pool, or ``None`` to use the loop default."""
        if self._hash_executor is None:
            from identity_registry.core import extensions

            self._hash_executor = extensions.get_hash_executor(required=False)
        return self._hash_executor

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            return api_errors.Conflict(str(exc))

        if isinstance(exc, StorageUnavailableError):
            # → 503 Service Unavailable
            return api_errors.ServiceUnavailable(str(exc))

        # → 400 Bad Request with the error's own code, duplicates included
        if isinstance(exc, RegistrationError):
            return api_errors.APIError(message=str(exc), status_code=400, code=exc.code)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
