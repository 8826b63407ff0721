"""Registration Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from identity_registry.services.registration.dto import UserRegistrationIn


class RegisterSchema(Schema):
    """Input payload for account registration.

    Values load untyped and absent fields load as ``None``: the registration
    workflow owns every content rule, so a non-string ``email`` is answered
    with the email message rather than a schema error.
    """

    class Meta:
        unknown = EXCLUDE

    email = fields.Raw(load_default=None, allow_none=True)
    username = fields.Raw(load_default=None, allow_none=True)
    password = fields.Raw(load_default=None, allow_none=True)

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> UserRegistrationIn:
        return UserRegistrationIn(**data)
