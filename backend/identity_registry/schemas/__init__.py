"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import RegisterSchema
from .user import UserSchema

__all__ = [
    "RegisterSchema",
    "UserSchema",
]
