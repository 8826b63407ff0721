"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from identity_registry.core.config import BaseConfig, get_config
from identity_registry.core.logger import configure_logging, init_app as init_logging
from identity_registry.services._shared.ports import CredentialStore, PasswordHasher


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    store: CredentialStore | None = None,
    hasher: PasswordHasher | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    ``store`` and ``hasher`` override the default in-memory store and the
    werkzeug hasher, e.g. to plug in a durable backend.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from identity_registry.core import extensions

    extensions.init_app(app, store=store, hasher=hasher)

    init_logging(app)

    from identity_registry.core import cors

    cors.init_app(app)

    from identity_registry.api import init_app as init_api

    init_api(app)

    from identity_registry.core import errors

    errors.init_app(app)

    return app
