import pytest

from identity_registry.core import errors as api_errors
from identity_registry.services._shared.base import BaseService, ServiceContext
from identity_registry.services._shared.errors import (
    ConflictError,
    DuplicateIdentityError,
    InvalidPasswordError,
    MissingFieldError,
    NotFoundError,
    ServiceError,
    StorageUnavailableError,
)


@pytest.fixture()
def service(store, plain_hasher) -> BaseService:
    return BaseService(store=store, hasher=plain_hasher)


def test_injected_collaborators_are_used(store, plain_hasher):
    svc = BaseService(store=store, hasher=plain_hasher, ctx=ServiceContext(request_id="rid"))
    assert svc.store is store
    assert svc.hasher is plain_hasher
    assert svc.ctx.request_id == "rid"


def test_defaults_come_from_the_app(app, store):
    with app.app_context():
        svc = BaseService()
        assert svc.store is store
        assert svc.hasher.verify(svc.hasher.hash("Password@123"), "Password@123")
        assert svc.hash_executor is not None


def test_store_is_required_outside_app_context():
    with pytest.raises(RuntimeError):
        BaseService()


def test_hash_executor_is_optional_outside_app_context(service):
    assert service.hash_executor is None


def test_translate_duplicate_to_bad_request(service):
    out = service.translate_exceptions(DuplicateIdentityError("a@b.io"))
    assert type(out) is api_errors.APIError
    assert out.status_code == 400
    assert out.code == "user_exists"
    assert out.message == "User already exists"


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (MissingFieldError(), "missing_fields"),
        (InvalidPasswordError(), "invalid_password"),
    ],
)
def test_translate_registration_errors_to_bad_request(service, exc, code):
    out = service.translate_exceptions(exc)
    assert isinstance(out, api_errors.APIError)
    assert out.status_code == 400
    assert out.code == code
    assert out.message == str(exc)


def test_translate_not_found(service):
    out = service.translate_exceptions(NotFoundError("User", "x@y.io"))
    assert isinstance(out, api_errors.NotFound)
    assert out.status_code == 404


def test_translate_generic_conflict(service):
    out = service.translate_exceptions(ConflictError("User", "taken"))
    assert isinstance(out, api_errors.Conflict)
    assert out.code == "conflict"


def test_translate_storage_unavailable(service):
    out = service.translate_exceptions(StorageUnavailableError("down"))
    assert isinstance(out, api_errors.ServiceUnavailable)
    assert out.status_code == 503


def test_translate_plain_service_error(service):
    out = service.translate_exceptions(ServiceError("nope"))
    assert out.status_code == 400
    assert out.code == "bad_request"


def test_unknown_exceptions_pass_through(service):
    exc = ValueError("boom")
    assert service.translate_exceptions(exc) is exc
