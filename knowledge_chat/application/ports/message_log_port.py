from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageLogPort(Protocol):
    def count_user_messages_since(self, user_id: str, since: datetime) -> int:
        """Count role="user" messages in the user's conversations with created_at >= since."""
        ...
