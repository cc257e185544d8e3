"""Tests for domain errors, especially ownership error kinds."""

import pytest

from knowledge_chat.domain.errors import (
    DomainError,
    Forbidden,
    OwnershipError,
    OwnershipErrorKind,
    RateLimitStoreError,
    ResourceNotFound,
    Unauthenticated,
    UserNotFound,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls,kind,status",
    [
        (Unauthenticated, OwnershipErrorKind.UNAUTHENTICATED, 401),
        (UserNotFound, OwnershipErrorKind.USER_NOT_FOUND, 404),
        (ResourceNotFound, OwnershipErrorKind.RESOURCE_NOT_FOUND, 404),
        (Forbidden, OwnershipErrorKind.FORBIDDEN, 403),
    ],
)
def test_ownership_errors_carry_kind_and_status(error_cls, kind, status):
    err = error_cls()
    assert isinstance(err, OwnershipError)
    assert isinstance(err, DomainError)
    assert err.kind is kind
    assert err.status_code == status


def test_ownership_kinds_are_distinct():
    kinds = {cls().kind for cls in (Unauthenticated, UserNotFound, ResourceNotFound, Forbidden)}
    assert len(kinds) == 4


def test_default_messages():
    assert str(Unauthenticated()) == "Authentication required"
    assert str(UserNotFound()) == "User not found"
    assert str(ResourceNotFound()) == "Chatbot not found"
    assert Forbidden().message.startswith("Unauthorized")


def test_custom_message_does_not_change_kind():
    err = Forbidden("not a member of creator cr-1")
    assert err.message == "not a member of creator cr-1"
    assert err.kind is OwnershipErrorKind.FORBIDDEN


def test_rate_limit_store_error_is_domain_error():
    err = RateLimitStoreError("db down")
    assert isinstance(err, DomainError)
    assert str(err) == "db down"


def test_validation_error_still_works():
    err = ValidationError("Invalid input")
    assert isinstance(err, DomainError)
    assert str(err) == "Invalid input"
