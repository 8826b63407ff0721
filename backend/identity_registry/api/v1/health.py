"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from identity_registry.api.deps import json_response, timing
from identity_registry.services import IdentityService

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application health and registry size."""

    version = current_app.config.get("APP_VERSION", "dev")
    users = IdentityService().count_users()
    return json_response({"status": "ok", "version": version, "users": users})
