"""User endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from identity_registry.api.deps import json_response, service_context, timing
from identity_registry.schemas import UserSchema
from identity_registry.services import IdentityService
from identity_registry.services._shared.errors import ServiceError

bp = Blueprint("users", __name__, url_prefix="/users")

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)


@bp.get("")
@timing
def list_users():
    """Return every registered user, oldest first."""

    service = IdentityService(ctx=service_context())
    return json_response({"users": user_list_schema.dump(service.list_users())})


@bp.get("/lookup")
@timing
def lookup_user():
    """Return the user registered under the ``email`` query parameter."""

    service = IdentityService(ctx=service_context())
    try:
        user = service.get_by_email(request.args.get("email", ""))
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"user": user_schema.dump(user)})
