# identity_registry/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from identity_registry.services._shared.ports import PasswordHasher

DEFAULT_METHOD = "scrypt:32768:8:1"
DEFAULT_SALT_LENGTH = 16


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Adapter over :mod:`werkzeug.security`.

    ``method`` is the work-factor knob, e.g. ``"scrypt:32768:8:1"`` or
    ``"pbkdf2:sha256:600000"``. Every hash gets a fresh random salt.
    """

    method: str = DEFAULT_METHOD
    salt_length: int = DEFAULT_SALT_LENGTH

    def hash(self, raw: str) -> str:
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(raw, method=self.method, salt_length=self.salt_length)

    def verify(self, hashed: str, raw: str) -> bool:
        if not hashed:
            return False
        return bool(check_password_hash(hashed, raw))

    @classmethod
    def from_config(cls, config) -> WerkzeugPasswordHasher:
        """Build the hasher from a Flask-style config mapping."""
        return cls(
            method=str(config.get("PASSWORD_HASH_METHOD", DEFAULT_METHOD)),
            salt_length=int(config.get("PASSWORD_SALT_LENGTH", DEFAULT_SALT_LENGTH)),
        )
