from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from chatai.config import DEFAULT_MODEL, ConnectionConfig

ORGANIZATION = "chatai"
APPLICATION = "OpenAIChatAppSettings"

BASE_URL_KEY = "baseUrl"
API_KEY_KEY = "apiKey"


class QSettingsStore:
    """Connection settings kept in Qt's key-value store.

    Only the base URL and API key are persisted; the model name is supplied
    by the app config on every load.
    """

    def __init__(self, *, path: Path | None = None, model: str = DEFAULT_MODEL):
        if path is None:
            self._settings = QSettings(ORGANIZATION, APPLICATION)
        else:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        self._model = model

    def load(self) -> ConnectionConfig:
        return ConnectionConfig(
            base_url=self._read(BASE_URL_KEY),
            api_key=self._read(API_KEY_KEY),
            model=self._model,
        )

    def save(self, config: ConnectionConfig) -> None:
        self._settings.setValue(BASE_URL_KEY, config.base_url)
        self._settings.setValue(API_KEY_KEY, config.api_key)
        self._settings.sync()

    def _read(self, key: str) -> str:
        value = self._settings.value(key, "")
        return "" if value is None else str(value)
