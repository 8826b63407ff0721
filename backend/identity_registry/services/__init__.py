"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`identity_registry.services` without knowing
internal structure.

Re-exports
----------
- Base primitives (from ``identity_registry.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Identity service (from ``identity_registry.services.identity``)
    * :class:`IdentityService`
    * DTOs: :class:`CredentialRecord`, :class:`UserPublicOut`

- Registration service (from ``identity_registry.services.registration``)
    * :class:`UserRegistrationService`, :func:`prepare_registration`
    * DTOs: :class:`UserRegistrationIn`, :class:`PreparedRegistration`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext
from .identity.dto import CredentialRecord, UserPublicOut

# Identity service + DTOs
from .identity.service import IdentityService
from .registration.dto import PreparedRegistration, UserRegistrationIn

# Registration service + DTOs
from .registration.service import UserRegistrationService, prepare_registration

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Identity
    "IdentityService",
    "CredentialRecord",
    "UserPublicOut",
    # Registration
    "UserRegistrationService",
    "prepare_registration",
    "UserRegistrationIn",
    "PreparedRegistration",
]
