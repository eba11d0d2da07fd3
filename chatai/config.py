from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from urllib.parse import urlsplit

DEFAULT_MODEL = "local-model"
DEFAULT_LOG_DIR = "logs"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ConnectionConfig:
    base_url: str = ""
    api_key: str = ""
    model: str = DEFAULT_MODEL

    def with_credentials(self, base_url: str, api_key: str) -> "ConnectionConfig":
        # The API key is kept exactly as entered.
        return replace(self, base_url=base_url.strip(), api_key=api_key)

    @property
    def has_valid_base_url(self) -> bool:
        parts = urlsplit(self.base_url.strip())
        return parts.scheme in ("http", "https") and bool(parts.netloc)


@dataclass(frozen=True)
class AppConfig:
    model: str = DEFAULT_MODEL
    settings_file: Path | None = None
    log_dir: Path = Path(DEFAULT_LOG_DIR)
    save_log: bool = False

    @staticmethod
    def from_env() -> "AppConfig":
        model = (os.getenv("CHATAI_MODEL") or "").strip() or DEFAULT_MODEL

        settings_file_raw = os.getenv("CHATAI_SETTINGS_FILE") or None
        settings_file = Path(settings_file_raw) if settings_file_raw else None

        log_dir = Path(os.getenv("CHATAI_LOG_DIR") or DEFAULT_LOG_DIR)

        save_log_raw = (os.getenv("CHATAI_SAVE_LOG") or "").strip().lower()
        if save_log_raw in _TRUE_VALUES:
            save_log = True
        elif save_log_raw in _FALSE_VALUES:
            save_log = False
        else:
            raise ValueError("CHATAI_SAVE_LOG must be a boolean (true/false).")

        return AppConfig(
            model=model,
            settings_file=settings_file,
            log_dir=log_dir,
            save_log=save_log,
        )
