"""JSON logging on stdout, correlated per request.

Every record written through the root handler carries a ``request_id``. Inside
a request it is taken from ``X-Request-ID`` / ``X-Correlation-ID`` or minted
once per request; services may pass their own through ``extra``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

# ``extra`` members copied onto the JSON line when a record carries them.
EXTRA_KEYS = ("remote_addr", "user_id", "code", "endpoint", "elapsed_ms")

_HANDLER_MARK = "_identity_registry_json"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; ``None`` extras are left out."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "time": stamp.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Fill in ``request_id`` unless the caller already supplied one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _incoming_request_id() -> str | None:
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header, "").strip()
        if value:
            return value
    return None


def ensure_request_id() -> str:
    """
    Return the correlation id of the current request.

    The first call in a request pins the id on :data:`flask.g`. Outside a
    request every call returns a fresh uuid4.
    """
    if not has_request_context():
        return str(uuid4())
    request_id = g.get("request_id")
    if request_id is None:
        request_id = _incoming_request_id() or str(uuid4())
        g.request_id = request_id
    return request_id


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int = "INFO") -> logging.Handler:
    """
    Install the JSON stdout handler on the root logger.

    Calling it again (one call per application built) replaces the handler it
    installed before and leaves foreign handlers alone.

    :param level: Level name or number; unknown names fall back to ``INFO``.
    :returns: The installed handler.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    setattr(handler, _HANDLER_MARK, True)

    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    return handler


def init_app(app: Flask) -> None:
    """Pin a request id on every request and return it in ``X-Request-ID``."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _pin_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["JSONFormatter", "configure_logging", "ensure_request_id", "init_app"]
