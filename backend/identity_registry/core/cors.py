"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def parse_origins(raw: str | None) -> list[str]:
    """Split a comma-separated origins setting, dropping blanks."""
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


def init_app(app: Flask) -> None:
    """Configure CORS for API endpoints based on application config.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS``, ``CORS_MAX_AGE`` and
        ``API_BASE_PREFIX`` settings are consulted. When ``CORS_ORIGINS`` is
        blank or ``"*"`` the policy allows any origin but disables credential
        support.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS", ""))
    wildcard = len(origins) == 0 or origins == ["*"]
    api_prefix = str(app.config.get("API_BASE_PREFIX", "/api")).rstrip("/")

    CORS(
        app,
        resources={rf"{api_prefix}/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        expose_headers=["X-Request-ID"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
