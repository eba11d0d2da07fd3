from __future__ import annotations

from typing import Protocol, Sequence

from chatai.config import ConnectionConfig
from chatai.domain.vo.chat_turn import ChatTurn


class CompletionClient(Protocol):
    def complete(
        self, messages: Sequence[ChatTurn], config: ConnectionConfig
    ) -> tuple[ChatTurn, ...]:
        """Run one request/response cycle for the given history.

        Returns zero or more assistant turns on success, or exactly one
        system turn describing the failure. Must not raise.
        """
        ...

    def close(self) -> None:
        """Release network resources."""
        ...
