from __future__ import annotations

from queue import Empty, Queue
from threading import Lock, Thread
from typing import NamedTuple

from chatai.application.port.completion_client import CompletionClient
from chatai.config import ConnectionConfig
from chatai.domain.entity.transcript import Transcript
from chatai.domain.vo.chat_turn import ChatTurn
from chatai.utils.logger import Logger


class CompletionItem(NamedTuple):
    request_id: int
    turns: tuple[ChatTurn, ...]


class ChatSession:
    """One conversation: a transcript plus the request/response pipeline.

    `send` appends the user's turn immediately and runs the completion on a
    worker thread. The worker never touches the transcript; it posts a
    `CompletionItem` to `completion_queue`, and the owning thread applies it
    with `apply_completion` or `process_pending`.

    Nothing stops a caller from sending again before a reply arrives. Items
    are then applied in the order the requests finish.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        *,
        transcript: Transcript | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.completion_client = completion_client
        self.transcript = transcript if transcript is not None else Transcript()
        self.logger = logger
        self.completion_queue: Queue[CompletionItem] = Queue()

        self._state_lock = Lock()
        self._request_id = 0
        self._pending_requests = 0

    @property
    def pending_requests(self) -> int:
        with self._state_lock:
            return self._pending_requests

    def send(self, user_text: str, config: ConnectionConfig) -> int | None:
        if not user_text.strip():
            return None

        self.transcript.append(ChatTurn.user(user_text))
        self._log(f"You: {user_text}")
        messages = self.transcript.snapshot()

        request_id = self._begin_request()
        worker = Thread(
            target=self._request,
            args=(request_id, messages, config),
            daemon=True,
        )
        try:
            worker.start()
        except RuntimeError as e:
            self._log(f"Error starting worker thread: {e}")
            self.completion_queue.put(
                CompletionItem(request_id, (ChatTurn.system(f"Exception {e}"),))
            )
        return request_id

    def send_and_wait(
        self,
        user_text: str,
        config: ConnectionConfig,
        timeout: float | None = None,
    ) -> tuple[ChatTurn, ...]:
        """Send and block until that request's reply has been applied.

        Replies to other in-flight requests that arrive first are applied as
        well, but only this request's turns are returned.
        """
        request_id = self.send(user_text, config)
        if request_id is None:
            return ()

        while True:
            item = self.completion_queue.get(timeout=timeout)
            self.apply_completion(item)
            if item.request_id == request_id:
                return item.turns

    def apply_completion(self, item: CompletionItem) -> None:
        for turn in item.turns:
            self.transcript.append(turn)
            if turn.role == "assistant":
                self._log(f"Assistant: {turn.content}")
            else:
                self._log(turn.content)

        with self._state_lock:
            self._pending_requests = max(0, self._pending_requests - 1)

    def process_pending(
        self, *, block: bool = False, timeout: float | None = None
    ) -> int:
        """Apply every queued completion on the calling thread.

        With `block=True`, waits up to `timeout` for the first item.
        """
        applied = 0
        try:
            item = self.completion_queue.get(block=block, timeout=timeout)
        except Empty:
            return applied

        while True:
            self.apply_completion(item)
            applied += 1
            try:
                item = self.completion_queue.get_nowait()
            except Empty:
                return applied

    def _request(
        self,
        request_id: int,
        messages: tuple[ChatTurn, ...],
        config: ConnectionConfig,
    ) -> None:
        try:
            turns = tuple(self.completion_client.complete(messages, config))
        except Exception as e:
            # Clients should not raise; still deliver exactly one item.
            self._log(f"Unexpected completion error: {e}")
            turns = (ChatTurn.system(f"Exception {e}"),)

        self.completion_queue.put(CompletionItem(request_id, turns))

    def _begin_request(self) -> int:
        with self._state_lock:
            self._request_id += 1
            self._pending_requests += 1
            return self._request_id

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)
