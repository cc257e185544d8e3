"""Domain errors (typed) for the chat core.

Handlers map errors by their ``kind``, never by message text.
"""

from enum import Enum


class DomainError(Exception):
    """Base class for domain-specific errors."""


class ValidationError(DomainError):
    """Invalid input/domain state."""


class RateLimitStoreError(DomainError):
    """Message log could not be queried (after infra errors were mapped)."""


class OwnershipErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    USER_NOT_FOUND = "user_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"


_STATUS_BY_KIND = {
    OwnershipErrorKind.UNAUTHENTICATED: 401,
    OwnershipErrorKind.USER_NOT_FOUND: 404,
    OwnershipErrorKind.RESOURCE_NOT_FOUND: 404,
    OwnershipErrorKind.FORBIDDEN: 403,
}


class OwnershipError(DomainError):
    """Caller may not access a creator-owned resource."""

    kind: OwnershipErrorKind
    default_message = "Access check failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]


class Unauthenticated(OwnershipError):
    kind = OwnershipErrorKind.UNAUTHENTICATED
    default_message = "Authentication required"


class UserNotFound(OwnershipError):
    kind = OwnershipErrorKind.USER_NOT_FOUND
    default_message = "User not found"


class ResourceNotFound(OwnershipError):
    kind = OwnershipErrorKind.RESOURCE_NOT_FOUND
    default_message = "Chatbot not found"


class Forbidden(OwnershipError):
    kind = OwnershipErrorKind.FORBIDDEN
    default_message = "Unauthorized: You do not have access to this chatbot"
