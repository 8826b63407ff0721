"""Registration endpoint using the service layer."""

from __future__ import annotations

from flask import Blueprint

from identity_registry.api.deps import json_body, json_response, service_context, timing
from identity_registry.schemas import RegisterSchema, UserSchema
from identity_registry.services import UserRegistrationService
from identity_registry.services._shared.errors import ServiceError

bp = Blueprint("auth", __name__, url_prefix="/auth")

register_schema = RegisterSchema()
user_schema = UserSchema()


@bp.post("/register")
@timing
def register():
    """Register a new user and return its public representation."""

    dto = register_schema.load(json_body())
    service = UserRegistrationService(ctx=service_context())
    try:
        user = service.register(dto)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"user": user_schema.dump(user)}, status=201)
