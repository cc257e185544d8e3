from typing import Protocol, runtime_checkable

from knowledge_chat.domain.models import UserRecord


@runtime_checkable
class UserDirectoryPort(Protocol):
    def find_by_external_id(self, external_id: str) -> UserRecord | None: ...
