"""Tests for the model list demo CLI."""

from unittest.mock import AsyncMock, patch

import pytest

from app.demo import format_summary, main
from app.models.github_models import EnrichedModelCard
from app.services.llm.errors import AuthenticationError, ProviderError

CARDS = [
    EnrichedModelCard(
        id="gpt-4o",
        displayName="OpenAI GPT-4o",
        description="x" * 120,
        enabled=True,
        contextWindowTokens=128000,
        functionCall=True,
        vision=True,
    ),
    EnrichedModelCard(id="o3-mini", displayName="O3 Mini", description="", reasoning=True),
]


def test_format_summary_counts_and_samples():
    text = format_summary(CARDS)
    assert "Total Models: 2" in text
    assert "With Function Calling: 1" in text
    assert "With Vision: 1" in text
    assert "With Reasoning: 1" in text
    assert "Enabled by Default: 1" in text
    assert "1. OpenAI GPT-4o (gpt-4o)" in text
    assert "Context Window: 128,000 tokens" in text
    assert "x" * 80 + "..." in text
    assert "No description available" in text


def test_format_summary_respects_limit():
    many = [EnrichedModelCard(id=f"m{i}", displayName=f"M{i}") for i in range(8)]
    text = format_summary(many)
    assert "5. M4 (m4)" in text
    assert "6. M5" not in text
    assert "2. M1 (m1)" in format_summary(many, limit=2)
    assert "3. M2" not in format_summary(many, limit=2)


def test_missing_token_exits_without_network(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    with patch("app.demo.get_provider") as mock_get_provider:
        assert main([]) == 1
    mock_get_provider.assert_not_called()
    assert "GITHUB_TOKEN environment variable is required" in capsys.readouterr().err


def test_success_prints_summary(monkeypatch, capsys):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
    mock_provider = AsyncMock()
    mock_provider.base_url = "https://models.inference.ai.azure.com"
    mock_provider.list_models.return_value = CARDS

    with patch("app.demo.get_provider", return_value=mock_provider) as mock_get_provider:
        assert main([]) == 0

    mock_get_provider.assert_called_once_with(api_key="ghp_test")
    out = capsys.readouterr().out
    assert "Base URL: https://models.inference.ai.azure.com" in out
    assert "Retrieved 2 models" in out
    assert "Demo completed successfully!" in out


def test_unauthorized_prints_guidance(monkeypatch, capsys):
    monkeypatch.setenv("GITHUB_TOKEN", "bad")
    mock_provider = AsyncMock()
    mock_provider.base_url = "https://models.inference.ai.azure.com"
    mock_provider.list_models.side_effect = AuthenticationError("GitHub token rejected")

    with patch("app.demo.get_provider", return_value=mock_provider):
        assert main([]) == 1

    err = capsys.readouterr().err
    assert "GitHub token rejected" in err
    assert "Error Type: InvalidGithubToken" in err
    assert "authentication issue" in err


@pytest.mark.parametrize(
    "error",
    [ProviderError("upstream down"), RuntimeError("socket closed")],
)
def test_other_errors_exit_non_zero_without_guidance(monkeypatch, capsys, error):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
    mock_provider = AsyncMock()
    mock_provider.base_url = "https://models.inference.ai.azure.com"
    mock_provider.list_models.side_effect = error

    with patch("app.demo.get_provider", return_value=mock_provider):
        assert main([]) == 1

    err = capsys.readouterr().err
    assert str(error) in err
    assert "authentication issue" not in err
