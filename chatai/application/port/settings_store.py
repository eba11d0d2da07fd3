from __future__ import annotations

from typing import Protocol

from chatai.config import ConnectionConfig


class SettingsStore(Protocol):
    def load(self) -> ConnectionConfig:
        """Return the saved connection settings (empty strings when unset)."""
        ...

    def save(self, config: ConnectionConfig) -> None:
        """Persist base URL and API key."""
        ...
