from __future__ import annotations

from collections.abc import Callable, Iterator
from threading import Lock

from chatai.domain.vo.chat_turn import ChatTurn


TurnListener = Callable[[ChatTurn], None]


class Transcript:
    """Append-only, in-memory conversation history.

    Insertion order is conversation order and is replayed verbatim on every
    request. Nothing is trimmed, deduplicated or filtered, and nothing
    survives a process restart.

    Listeners registered with `subscribe` are called with each appended turn,
    on the appending thread, after the turn is stored.
    """

    def __init__(self, turns: list[ChatTurn] | None = None):
        self._turns: list[ChatTurn] = list(turns or [])
        self._listeners: list[TurnListener] = []
        self._lock = Lock()

    def append(self, turn: ChatTurn) -> None:
        with self._lock:
            self._turns.append(turn)
            listeners = list(self._listeners)

        for listener in listeners:
            listener(turn)

    def snapshot(self) -> tuple[ChatTurn, ...]:
        with self._lock:
            return tuple(self._turns)

    def subscribe(self, listener: TurnListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(self.snapshot())
