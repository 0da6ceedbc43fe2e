"""Fetch the GitHub Models list and print an enriched summary.

Usage:
    GITHUB_TOKEN=your_token github-models-demo [--limit 5] [--verbose]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Sequence

from app.models.github_models import EnrichedModelCard
from app.services.llm.errors import ConfigurationError, ProviderRuntimeError
from app.services.llm.registry import PROVIDER_DISPLAY_NAME, get_provider

_RULE_WIDTH = 50
_DESCRIPTION_LIMIT = 80

_AUTH_GUIDANCE = """
   This is likely an authentication issue.
   Please verify:
   1. Your GitHub token is valid
   2. You have access to GitHub Models
   3. The token has appropriate permissions"""


def _mark(flag: bool) -> str:
    return "✓" if flag else "✗"


def _truncate(text: str, limit: int = _DESCRIPTION_LIMIT) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def format_summary(models: Sequence[EnrichedModelCard], limit: int = 5) -> str:
    """Render capability counts and the first ``limit`` cards as text."""
    lines = [
        f"Total Models: {len(models)}",
        f"  - With Function Calling: {sum(m.functionCall for m in models)}",
        f"  - With Vision: {sum(m.vision for m in models)}",
        f"  - With Reasoning: {sum(m.reasoning for m in models)}",
        f"  - Enabled by Default: {sum(m.enabled for m in models)}",
        "",
        "Sample Models:",
        "-" * _RULE_WIDTH,
    ]
    for index, model in enumerate(models[:limit], start=1):
        lines.append(f"\n{index}. {model.displayName} ({model.id})")
        lines.append(f"   Description: {_truncate(model.description or 'No description available')}")
        lines.append("   Capabilities:")
        lines.append(f"     - Function Call: {_mark(model.functionCall)}")
        lines.append(f"     - Vision: {_mark(model.vision)}")
        lines.append(f"     - Reasoning: {_mark(model.reasoning)}")
        if model.contextWindowTokens:
            lines.append(f"   Context Window: {model.contextWindowTokens:,} tokens")
        lines.append(f"   Enabled: {'Yes' if model.enabled else 'No'}")
    return "\n".join(lines)


async def run(token: str, limit: int) -> int:
    provider = get_provider(api_key=token)
    print(f"{PROVIDER_DISPLAY_NAME} List Retrieval Demo")
    print("=" * _RULE_WIDTH)
    print(f"Base URL: {provider.base_url}\n")

    print("Fetching model list...")
    models = await provider.list_models()
    print(f"Retrieved {len(models)} models\n")

    print(format_summary(models, limit=limit))
    print()
    print("=" * _RULE_WIDTH)
    print("Demo completed successfully!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="GitHub Models list retrieval demo")
    parser.add_argument("--limit", type=int, default=5, help="Number of sample models to show")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    token = os.environ.get("GITHUB_TOKEN")
    if not token:
        print("Error: GITHUB_TOKEN environment variable is required", file=sys.stderr)
        print("\nUsage:\n  GITHUB_TOKEN=your_token github-models-demo", file=sys.stderr)
        return 1

    try:
        return asyncio.run(run(token, args.limit))
    except ConfigurationError as exc:
        print(f"\nConfiguration error: {exc.message}", file=sys.stderr)
        return 1
    except ProviderRuntimeError as exc:
        print("\nError fetching models:", file=sys.stderr)
        print(f"   {exc.message}", file=sys.stderr)
        print(f"   Error Type: {exc.error_type}", file=sys.stderr)
        if exc.status_code == 401:
            print(_AUTH_GUIDANCE, file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"\nError fetching models:\n   {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
