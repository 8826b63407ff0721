"""Pytest fixtures building an isolated application per test.

Every test gets a fresh :class:`InMemoryCredentialStore`, so registrations
never leak between cases.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest
from flask import Flask

from identity_registry.core.config import TestingConfig
from identity_registry.factory import create_app
from identity_registry.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from identity_registry.services._shared.ports import (
    InMemoryCredentialStore,
    PlainTextPasswordHasher,
)


@pytest.fixture()
def store() -> InMemoryCredentialStore:
    """Provide an empty credential store."""
    return InMemoryCredentialStore()


@pytest.fixture()
def plain_hasher() -> PlainTextPasswordHasher:
    """Provide the deterministic test hasher (counts its calls)."""
    return PlainTextPasswordHasher()


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    """Provide a real, cheaply configured werkzeug hasher."""
    return WerkzeugPasswordHasher(method=TestingConfig.PASSWORD_HASH_METHOD)


@pytest.fixture()
def app(store: InMemoryCredentialStore) -> Flask:
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied, bound to the
        ``store`` fixture and the werkzeug hasher from config.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("PASSWORD_HASH_METHOD", None)
    application = create_app(TestingConfig, store=store, instance_relative_config=False)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
