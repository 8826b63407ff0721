"""Factory Boy helpers producing registration payloads."""

from __future__ import annotations

import factory

from identity_registry.services.registration.dto import UserRegistrationIn

VALID_PASSWORD = "Password@123"


class UserRegistrationInFactory(factory.Factory):
    """
    Build valid :class:`UserRegistrationIn` payloads.

    Override any field to craft an invalid one, e.g.
    ``UserRegistrationInFactory(username="ab")``.
    """

    class Meta:
        model = UserRegistrationIn

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    username = factory.Sequence(lambda n: f"user_{n}")
    password = VALID_PASSWORD


__all__ = ["UserRegistrationInFactory", "VALID_PASSWORD"]
