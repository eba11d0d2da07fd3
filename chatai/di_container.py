from __future__ import annotations

from dataclasses import dataclass

from chatai.application.chat_session import ChatSession
from chatai.application.port.completion_client import CompletionClient
from chatai.application.port.settings_store import SettingsStore
from chatai.config import AppConfig, ConnectionConfig
from chatai.domain.entity.transcript import Transcript
from chatai.infrastructure.openai.completion_client import OpenAICompletionClient
from chatai.utils.logger import Logger


@dataclass(frozen=True)
class AppContainer:
    config: AppConfig
    logger: Logger
    settings_store: SettingsStore
    completion_client: CompletionClient
    session: ChatSession

    def load_connection(self) -> ConnectionConfig:
        return self.settings_store.load()

    def close(self) -> None:
        self.completion_client.close()


def build_container(
    config: AppConfig,
    *,
    logger: Logger | None = None,
    settings_store: SettingsStore | None = None,
    completion_client: CompletionClient | None = None,
    transcript: Transcript | None = None,
) -> AppContainer:
    logger = logger or Logger(log_dir=config.log_dir)

    if settings_store is None:
        from chatai.infrastructure.qt.settings_store import QSettingsStore

        settings_store = QSettingsStore(path=config.settings_file, model=config.model)

    completion_client = completion_client or OpenAICompletionClient(logger=logger)

    session = ChatSession(
        completion_client=completion_client,
        transcript=transcript,
        logger=logger,
    )

    return AppContainer(
        config=config,
        logger=logger,
        settings_store=settings_store,
        completion_client=completion_client,
        session=session,
    )
