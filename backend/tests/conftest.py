import os

import pytest

# Disable rate limiting for tests
os.environ["GITHUB_MODELS_NO_RATE_LIMIT"] = "true"


@pytest.fixture(autouse=True)
def _clean_provider_env(monkeypatch):
    """Keep the developer's shell configuration out of the tests."""
    for name in (
        "GITHUB_MODELS_BASE_URL",
        "GITHUB_MODELS_KNOWN_MODELS_FILE",
        "DEBUG_GITHUB_CHAT_COMPLETION",
        "ALLOW_PRIVATE_URLS",
    ):
        monkeypatch.delenv(name, raising=False)
