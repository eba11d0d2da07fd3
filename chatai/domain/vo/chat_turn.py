from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


ChatRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatTurn:
    role: ChatRole
    content: str

    @staticmethod
    def user(content: str) -> "ChatTurn":
        return ChatTurn(role="user", content=content)

    @staticmethod
    def assistant(content: str) -> "ChatTurn":
        return ChatTurn(role="assistant", content=content)

    @staticmethod
    def system(content: str) -> "ChatTurn":
        # Locally synthesized status/error text, not a system prompt.
        return ChatTurn(role="system", content=content)

    def to_message(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
