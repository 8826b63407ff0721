"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from identity_registry.core.logger import ensure_request_id
from identity_registry.services import ServiceContext

F = TypeVar("F", bound=Callable[..., Any])


def json_body() -> dict[str, Any]:
    """Return the request JSON object, or an empty mapping when absent or not an object."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(request_id=ensure_request_id(), remote_addr=request.remote_addr)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
