from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentityProviderPort(Protocol):
    """Request-scoped view of the identity provider.

    Returns the caller's external subject, or None for anonymous callers.
    Called once per check, never cached.
    """

    def current_identity(self) -> str | None: ...
