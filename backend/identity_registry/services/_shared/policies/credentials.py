"""
Credential input policies.

Pure, stateless predicates used by the registration workflow and by any
transport that wants to pre-validate a payload. Nothing here performs I/O
or touches the credential store.
"""

from __future__ import annotations

import re
from typing import Any

EMAIL_MAX_LENGTH = 254
EMAIL_LOCAL_MAX_LENGTH = 64
EMAIL_DOMAIN_MAX_LENGTH = 253

_WHITESPACE_RUN = re.compile(r"\s+")
_EMAIL_SHAPE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_USERNAME_SHAPE = re.compile(r"[a-zA-Z0-9_]{3,20}")
_PASSWORD_SHAPE = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}",
    re.ASCII,
)


def normalize(text: Any, is_email: bool = False) -> Any:
    """
    Trim and collapse whitespace runs to a single space.

    :param text: Raw field value. Non-strings are returned unchanged.
    :type text: Any
    :param is_email: Also lower-case the result.
    :type is_email: bool
    :returns: Normalized value.
    :rtype: Any
    """
    if not isinstance(text, str):
        return text
    value = _WHITESPACE_RUN.sub(" ", text.strip())
    return value.lower() if is_email else value


def is_valid_email(email: Any) -> bool:
    """
    Return ``True`` when ``email`` looks like a deliverable address.

    Length limits follow RFC 5321 (254 total, 64 local part, 253 domain).
    The split keeps only the text between the first and second ``@``; the
    final shape match then rejects any extra ``@``.
    """
    if not email or not isinstance(email, str):
        return False
    if len(email) > EMAIL_MAX_LENGTH:
        return False

    parts = email.split("@")
    local_part = parts[0]
    domain = parts[1] if len(parts) > 1 else ""
    if not local_part or not domain:
        return False
    if len(local_part) > EMAIL_LOCAL_MAX_LENGTH or len(domain) > EMAIL_DOMAIN_MAX_LENGTH:
        return False
    if ".." in local_part or ".." in domain:
        return False
    if "." not in domain:
        return False

    return _EMAIL_SHAPE.fullmatch(email) is not None


def is_valid_username(username: Any) -> bool:
    """Return ``True`` for 3-20 letters, digits or underscores."""
    return isinstance(username, str) and _USERNAME_SHAPE.fullmatch(username) is not None


def is_valid_password(password: Any) -> bool:
    """
    Return ``True`` when ``password`` satisfies the strength policy.

    At least 8 characters with one lowercase, one uppercase, one digit and one
    of ``@$!%*?&``; no other characters allowed. No upper bound is applied.
    """
    return isinstance(password, str) and _PASSWORD_SHAPE.fullmatch(password) is not None


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None``, empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


__all__ = [
    "normalize",
    "is_valid_email",
    "is_valid_username",
    "is_valid_password",
    "is_blank",
]
