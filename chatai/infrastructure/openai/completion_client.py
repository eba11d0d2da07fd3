from __future__ import annotations

from typing import Any, Sequence, cast

import httpx
from openai import APIStatusError, DefaultHttpxClient, OpenAI
from openai.types.chat import ChatCompletionMessageParam

from chatai.config import ConnectionConfig
from chatai.domain.vo.chat_turn import ChatTurn
from chatai.utils.logger import Logger

MAX_TOKENS = 150
TIMEOUT_SECONDS = 30.0
API_PREFIX = "/v1"
SDK_API_KEY_PLACEHOLDER = "unused"


def api_base_url(base_url: str) -> str:
    """Map a user-entered server URL to the SDK base URL.

    The SDK appends `/chat/completions`, so requests go to
    `{base_url}/v1/chat/completions`.
    """
    return base_url.strip().rstrip("/") + API_PREFIX


class OpenAICompletionClient:
    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        logger: Logger | None = None,
    ):
        self._http_client = http_client or DefaultHttpxClient(
            timeout=httpx.Timeout(TIMEOUT_SECONDS)
        )
        self._logger = logger

    def complete(
        self, messages: Sequence[ChatTurn], config: ConnectionConfig
    ) -> tuple[ChatTurn, ...]:
        try:
            client = self._build_client(config)
            raw = client.chat.completions.with_raw_response.create(
                model=config.model,
                messages=cast(
                    list[ChatCompletionMessageParam],
                    [turn.to_message() for turn in messages],
                ),
                max_tokens=MAX_TOKENS,
            )
            turns = tuple(
                ChatTurn.assistant(content)
                for content in _choice_contents(raw.http_response.json())
            )
        except APIStatusError as e:
            self._log(f"Completion failed with HTTP {e.status_code}.")
            return (ChatTurn.system(f"Error {e.status_code}: {e.response.text}"),)
        except Exception as e:
            # Transport, timeout and parse failures all end up here.
            self._log(f"Completion failed: {type(e).__name__}: {e}")
            return (ChatTurn.system(f"Exception {e}"),)

        self._log(f"Completion returned {len(turns)} choice(s).")
        return turns

    def close(self) -> None:
        self._http_client.close()

    def _build_client(self, config: ConnectionConfig) -> OpenAI:
        # The SDK only sees a placeholder key; the real one, even when empty,
        # goes out in the Authorization header.
        return OpenAI(
            api_key=SDK_API_KEY_PLACEHOLDER,
            base_url=api_base_url(config.base_url),
            timeout=httpx.Timeout(TIMEOUT_SECONDS),
            max_retries=0,
            default_headers={
                "Authorization": f"Bearer {config.api_key}",
                "Content-Type": "application/json",
            },
            http_client=self._http_client,
        )

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log(message)


def _choice_contents(payload: Any) -> list[str]:
    choices = payload.get("choices") or []
    return [choice["message"].get("content") or "" for choice in choices]
