"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the
credential store, the validation policies and the application services.

The translation to HTTP responses (RFC 7807) is handled by
``identity_registry/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from stores, policies or services.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the store.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class StorageUnavailableError(ServiceError):
    """
    Raised by durable store adapters when the backend cannot be reached.

    The in-memory store never raises it. Callers surface it as a
    service-unavailable condition; it is never swallowed.
    """

    def __init__(self, message: str = "Credential storage unavailable") -> None:
        super().__init__(message)


# --------------------------------------------------------------------------- #
# Registration errors (caller input, fixed user-facing messages)
# --------------------------------------------------------------------------- #


class RegistrationError(ServiceError):
    """
    Base class for rejected registrations.

    Subclasses pin a stable machine ``code`` and the user-facing ``message``;
    ``str(exc)`` always returns the message verbatim.
    """

    code: str = "registration_rejected"
    message: str = "Registration rejected"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MissingFieldError(RegistrationError):
    """One of email, username or password is absent or blank."""

    code = "missing_fields"
    message = "Missing required fields"


class InvalidUsernameError(RegistrationError):
    """Username fails the 3-20 ``[A-Za-z0-9_]`` rule."""

    code = "invalid_username"
    message = "Invalid username. Use 3-20 characters (letters, numbers, underscores only)."


class InvalidEmailError(RegistrationError):
    """Email fails the address shape rules."""

    code = "invalid_email"
    message = "Invalid email address."


class InvalidPasswordError(RegistrationError):
    """Password fails the strength policy."""

    code = "invalid_password"
    message = (
        "Password must be at least 8 characters long, include uppercase, lowercase, "
        "number, and special character."
    )


class DuplicateIdentityError(RegistrationError):
    """
    A record with the same normalized email already exists.

    :param email: Normalized email that collided, kept for logging only.
    :type email: str | None
    """

    code = "user_exists"
    message = "User already exists"

    def __init__(self, email: str | None = None) -> None:
        super().__init__()
        self.email = email
