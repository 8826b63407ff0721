"""
DTOs for UserRegistrationService.

Contracts for the self-registration flow: raw candidate details in, a
normalized and validated payload in the middle, a public record out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRegistrationIn:
    """
    Raw input payload for the registration process.

    Values are taken as submitted; absent fields are ``None``.

    :param email: Login email (normalized to trimmed, collapsed lowercase).
    :type email: Any
    :param username: Public handle (trimmed, collapsed).
    :type username: Any
    :param password: Raw password, never normalized.
    :type password: Any
    """

    email: Any = None
    username: Any = None
    password: Any = None

    def __repr__(self) -> str:
        return f"UserRegistrationIn(email={self.email!r}, username={self.username!r})"


@dataclass(frozen=True, slots=True)
class PreparedRegistration:
    """
    Normalized and validated registration payload.

    :param email: Normalized email.
    :type email: str
    :param username: Normalized username.
    :type username: str
    :param password: Password exactly as submitted.
    :type password: str
    """

    email: str
    username: str
    password: str

    def __repr__(self) -> str:
        return f"PreparedRegistration(email={self.email!r}, username={self.username!r})"
