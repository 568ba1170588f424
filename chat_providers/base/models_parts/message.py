"""
Message DTO used across providers.

Defines the ``ChatMessage`` dataclass and the ``ChatRole`` enum. Ordering of
messages is owned by the caller and preserved by every layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ChatRole(str, Enum):
    """Author role of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """A single role-tagged chat message.

    Multiple ``SYSTEM`` messages are legal; they are passed through unchanged
    and are independent of ``ChatOptions.system_prompt``.
    """

    role: ChatRole
    content: str

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(ChatRole.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(ChatRole.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(ChatRole.ASSISTANT, content)

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


__all__ = ["ChatMessage", "ChatRole"]
