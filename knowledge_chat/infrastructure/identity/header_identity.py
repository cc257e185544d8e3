"""Identity provider adapters.

The upstream auth gateway verifies the session and forwards the subject in a
trusted header; these adapters only read it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from knowledge_chat.application.ports.identity_port import IdentityProviderPort

DEFAULT_IDENTITY_HEADER = "X-Authenticated-User"


@dataclass(frozen=True)
class HeaderIdentityProvider(IdentityProviderPort):
    """Request-scoped identity taken from the forwarded subject header."""

    headers: Mapping[str, str]
    header_name: str = DEFAULT_IDENTITY_HEADER

    def current_identity(self) -> str | None:
        value = self.headers.get(self.header_name)
        if value is None:
            # Starlette headers are case-insensitive, plain dicts are not
            lowered = self.header_name.lower()
            value = next((v for k, v in self.headers.items() if k.lower() == lowered), None)
        value = (value or "").strip()
        return value or None


@dataclass(frozen=True)
class StaticIdentityProvider(IdentityProviderPort):
    """Fixed subject (CLI, scripts)."""

    subject: str | None = None

    def current_identity(self) -> str | None:
        return self.subject or None
