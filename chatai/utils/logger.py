from __future__ import annotations

from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Callable


class Logger:
    """Session log kept in memory, mirrored to an optional subscriber.

    Lines may be written from worker threads; `on_emit` is invoked on the
    writing thread, so UI subscribers must marshal to their own thread.
    """

    def __init__(
        self,
        *,
        log_dir: Path = Path("logs"),
        on_emit: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.log_dir = log_dir
        self._on_emit: Callable[[str], None] | None = None
        self._clock = clock

        self._lines: list[str] = []
        self._lock = Lock()
        self._started_at = clock()

        # Set via property to keep replay behavior consistent.
        self.on_emit = on_emit

    @property
    def on_emit(self) -> Callable[[str], None] | None:
        return self._on_emit

    @on_emit.setter
    def on_emit(self, callback: Callable[[str], None] | None) -> None:
        # Only replay buffered logs when the first subscriber is attached.
        should_replay = self._on_emit is None and callback is not None
        self._on_emit = callback

        if should_replay:
            for line in self.lines:
                callback(line)

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def log(self, message: str) -> None:
        if not message:
            return

        line = f"[{self._clock():%H:%M:%S}] {message}"
        with self._lock:
            self._lines.append(line)

        if self._on_emit:
            self._on_emit(line)

    def save(self) -> Path:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        filename = self._started_at.strftime("%Y-%m-%d_%H-%M-%S.txt")
        path = self.log_dir / filename

        path.write_text("\n".join(self.lines), encoding="utf-8")
        return path
