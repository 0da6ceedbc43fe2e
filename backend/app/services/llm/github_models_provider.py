"""GitHub Models provider: OpenAI-compatible inference plus an enriched model list."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Sequence

import openai
from pydantic import ValidationError

from app.models.github_models import (
    EnrichedModelCard,
    KnownModelEntry,
    RemoteModelDescriptor,
)
from app.services.llm.base import BaseLLMProvider
from app.services.llm.enricher import enrich_models
from app.services.llm.errors import (
    ConfigurationError,
    ProviderError,
    map_openai_error,
)
from app.services.llm.known_models import load_known_models
from app.services.llm.payload import handle_chat_payload

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://models.inference.ai.azure.com"


def chat_debug_enabled() -> bool:
    return os.environ.get("DEBUG_GITHUB_CHAT_COMPLETION") == "1"


class GitHubModelsProvider(BaseLLMProvider):
    """GitHub Models marketplace, authenticated with a personal access token."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        model: str | None = None,
        known_models: Sequence[KnownModelEntry] | None = None,
    ):
        super().__init__(api_key=api_key, base_url=base_url, model=model)
        self.known_models = known_models

    def _client(self) -> openai.AsyncOpenAI:
        if not self.api_key:
            raise ConfigurationError("A GitHub personal access token is required")
        return openai.AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)

    async def fetch_remote_models(self) -> list[RemoteModelDescriptor]:
        """Call the vendor list endpoint once and return its raw descriptors."""
        client = self._client()
        try:
            # The endpoint answers with a bare JSON array, which the SDK's
            # page parser cannot read, so take the raw body instead.
            raw = await client.models.with_raw_response.list()
            data = raw.http_response.json()
        except (openai.APIError, ValueError) as exc:
            raise map_openai_error(exc) from exc

        if isinstance(data, dict):
            data = data.get("data")
        if not isinstance(data, list):
            raise ProviderError("Unexpected response shape from GitHub Models list endpoint")

        descriptors: list[RemoteModelDescriptor] = []
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                logger.warning(
                    "Skipping non-object GitHub model entry at index %d: %r", index, entry
                )
                continue
            try:
                descriptors.append(RemoteModelDescriptor.model_validate(entry))
            except ValidationError as exc:
                raise ProviderError(f"Malformed model entry from GitHub Models: {exc}") from exc
        return descriptors

    async def list_models(self) -> list[EnrichedModelCard]:
        remote = await self.fetch_remote_models()
        known = self.known_models if self.known_models is not None else load_known_models()
        cards = enrich_models(remote, known)
        logger.info("Fetched %d models from GitHub Models", len(cards))
        return cards

    async def test_connection(self) -> bool:
        if self.model:
            content, _ = await self.complete(
                [{"role": "user", "content": "Hi"}], max_tokens=1
            )
            return content is not None
        await self.fetch_remote_models()
        return True

    async def complete(self, messages: list[dict], **kwargs) -> tuple[str, bool]:
        model = kwargs.pop("model", None) or self.model
        if not model:
            raise ConfigurationError("No model selected")

        payload: dict[str, Any] = {"model": model, "messages": messages}
        payload.update({k: v for k, v in kwargs.items() if v is not None})
        payload = handle_chat_payload(payload)

        if chat_debug_enabled():
            logger.info("GitHub chat completion payload: %s", json.dumps(payload, default=str))

        client = self._client()
        try:
            if payload["stream"]:
                parts: list[str] = []
                stream = await client.chat.completions.create(**payload)
                async for chunk in stream:
                    if chunk.choices and chunk.choices[0].delta.content:
                        parts.append(chunk.choices[0].delta.content)
                return "".join(parts), True

            resp = await client.chat.completions.create(**payload)
        except openai.APIError as exc:
            raise map_openai_error(exc) from exc

        if not resp.choices:
            raise ProviderError(f"GitHub Models returned no choices for {model}")
        return resp.choices[0].message.content or "", False
