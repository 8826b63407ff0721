"""HTTP API: versioned blueprint groups mounted under ``API_BASE_PREFIX``."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flask import Blueprint, Flask

log = logging.getLogger(__name__)


def mount_path(*segments: str) -> str:
    """
    Join URL segments into one absolute path.

    Empty segments and stray slashes are dropped, so ``("/api/", "v1", "")``
    gives ``"/api/v1"`` and no segments at all give ``"/"``.
    """
    parts = [segment.strip("/") for segment in segments]
    return "/" + "/".join(part for part in parts if part)


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> list[str]:
    """Mount each ``(blueprint, relative_prefix)`` below ``base_prefix``.

    Returns
    -------
    list[str]
        The URL prefixes used, in registration order.
    """
    mounted: list[str] = []
    for blueprint, relative in entries:
        url_prefix = mount_path(base_prefix, relative)
        app.register_blueprint(blueprint, url_prefix=url_prefix)
        mounted.append(url_prefix)
    return mounted


def init_app(app: Flask) -> None:
    """Mount the v1 routes (register, users, health)."""

    from identity_registry.api.v1 import API_VERSION, REGISTRY

    base = mount_path(app.config.get("API_BASE_PREFIX", "/api"), API_VERSION)
    mounted = register_blueprint_group(app, base_prefix=base, entries=REGISTRY)
    log.debug("api.mounted prefixes=%s", mounted)


__all__ = ["init_app", "mount_path", "register_blueprint_group"]
