from queue import Empty

from PySide6.QtCore import QThread, Signal

from chatai.application.chat_session import ChatSession


class CompletionWorker(QThread):
    completed = Signal(object)
    log = Signal(str)

    POLL_INTERVAL_SECONDS = 0.1

    def __init__(self, session: ChatSession):
        super().__init__()
        self.session = session

        # Logger lines come from request threads; re-emit them as a signal.
        if self.session.logger:
            self.session.logger.on_emit = self.log.emit

    def run(self) -> None:
        try:
            while not self.isInterruptionRequested():
                try:
                    item = self.session.completion_queue.get(
                        timeout=self.POLL_INTERVAL_SECONDS
                    )
                except Empty:
                    continue
                # Applied on the GUI thread by the connected slot.
                self.completed.emit(item)
        except Exception as e:
            self.log.emit(f"Unexpected error: {e}")

    def stop(self) -> None:
        self.requestInterruption()
        self.wait()
