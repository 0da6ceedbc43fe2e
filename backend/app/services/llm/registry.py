"""Provider factory for GitHub Models."""

import os

from app.services.llm.errors import ConfigurationError
from app.services.llm.github_models_provider import DEFAULT_BASE_URL, GitHubModelsProvider
from app.services.llm.known_models import load_known_models
from app.services.llm.url_validator import SSRFError, validate_base_url

PROVIDER_DISPLAY_NAME = "GitHub Models"


def get_provider(
    api_key: str | None = None,
    base_url: str | None = None,
    model: str | None = None,
) -> GitHubModelsProvider:
    """Create a provider instance from the given configuration.

    The base URL defaults to GITHUB_MODELS_BASE_URL, then DEFAULT_BASE_URL.
    Overridden URLs are checked against SSRF before use.
    """
    base_url = base_url or os.environ.get("GITHUB_MODELS_BASE_URL")
    if base_url:
        try:
            validate_base_url(base_url)
        except SSRFError as exc:
            raise ConfigurationError(str(exc)) from exc

    return GitHubModelsProvider(
        api_key=api_key,
        base_url=base_url or DEFAULT_BASE_URL,
        model=model,
        known_models=load_known_models(),
    )
