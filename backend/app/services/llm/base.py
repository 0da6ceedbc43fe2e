"""Abstract base class for chat model providers."""

from abc import ABC, abstractmethod

from app.models.github_models import EnrichedModelCard


class BaseLLMProvider(ABC):
    def __init__(self, api_key: str | None, base_url: str, model: str | None = None):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model

    @abstractmethod
    async def test_connection(self) -> bool:
        """Test that the provider is reachable and credentials are valid."""
        ...

    @abstractmethod
    async def list_models(self) -> list[EnrichedModelCard]:
        """Return available models annotated with capability flags."""
        ...

    @abstractmethod
    async def complete(self, messages: list[dict], **kwargs) -> tuple[str, bool]:
        """Send a chat completion request.

        Returns the response text and whether the upstream call streamed.
        """
        ...
