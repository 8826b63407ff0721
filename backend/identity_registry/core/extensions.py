"""Per-application collaborators (credential store, hasher, hashing pool)."""

from __future__ import annotations

import atexit
import threading
from concurrent.futures import ThreadPoolExecutor

from flask import Flask, current_app, has_app_context

from identity_registry.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from identity_registry.services._shared.ports import (
    CredentialStore,
    InMemoryCredentialStore,
    PasswordHasher,
)

STORE_KEY = "credential_store"
HASHER_KEY = "password_hasher"
EXECUTOR_KEY = "hash_executor"

_executor_lock = threading.Lock()


def init_app(
    app: Flask,
    *,
    store: CredentialStore | None = None,
    hasher: PasswordHasher | None = None,
) -> None:
    """Bind the credential store and password hasher to ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the collaborators under ``app.extensions``.
    store: CredentialStore, optional
        Store to use; a fresh :class:`InMemoryCredentialStore` by default, so
        every application instance owns an isolated registry.
    hasher: PasswordHasher, optional
        Hasher to use; built from ``PASSWORD_HASH_METHOD`` and
        ``PASSWORD_SALT_LENGTH`` by default.
    """
    app.extensions[STORE_KEY] = store if store is not None else InMemoryCredentialStore()
    app.extensions[HASHER_KEY] = (
        hasher if hasher is not None else WerkzeugPasswordHasher.from_config(app.config)
    )
    # The hashing pool is created lazily; sync callers never need it.
    shutdown_hash_executor(app)


def _require_app(what: str) -> Flask:
    if not has_app_context():
        raise RuntimeError(f"{what} is not available outside an application context.")
    return current_app._get_current_object()  # type: ignore[attr-defined]


def get_store() -> CredentialStore:
    """Return the credential store bound to the current application."""
    app = _require_app("Credential store")
    store = app.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("Credential store is not initialized. Call init_app() first.")
    return store


def get_hasher() -> PasswordHasher:
    """Return the password hasher bound to the current application."""
    app = _require_app("Password hasher")
    hasher = app.extensions.get(HASHER_KEY)
    if hasher is None:
        raise RuntimeError("Password hasher is not initialized. Call init_app() first.")
    return hasher


def get_hash_executor(*, required: bool = True) -> ThreadPoolExecutor | None:
    """Return the app's hashing pool, creating it on first use.

    Parameters
    ----------
    required: bool
        When ``False`` return ``None`` outside an application context instead
        of raising.
    """
    if not has_app_context() and not required:
        return None
    app = _require_app("Hash executor")
    with _executor_lock:
        executor = app.extensions.get(EXECUTOR_KEY)
        if executor is None:
            executor = ThreadPoolExecutor(
                max_workers=int(app.config.get("HASH_WORKERS", 4)),
                thread_name_prefix="pwhash",
            )
            app.extensions[EXECUTOR_KEY] = executor
            atexit.register(executor.shutdown, wait=False)
        return executor


def shutdown_hash_executor(app: Flask) -> None:
    """Stop and forget ``app``'s hashing pool, if one was started.

    Queued hashes are abandoned; a later :func:`get_hash_executor` call starts
    a fresh pool.
    """
    with _executor_lock:
        executor = app.extensions.pop(EXECUTOR_KEY, None)
    if executor is not None:
        atexit.unregister(executor.shutdown)
        executor.shutdown(wait=False, cancel_futures=True)
