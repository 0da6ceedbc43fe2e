"""Curated metadata for models served by GitHub Models.

The vendor list endpoint does not report context windows or structured
capabilities, so these entries fill the gaps. A deployment can replace the
table with a JSON file via GITHUB_MODELS_KNOWN_MODELS_FILE.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import TypeAdapter

from app.models.github_models import KnownModelEntry, ModelAbilities
from app.services.llm.errors import ConfigurationError

logger = logging.getLogger(__name__)

_FUNCTION_CALL = ModelAbilities(functionCall=True)
_REASONING = ModelAbilities(reasoning=True)

DEFAULT_KNOWN_MODELS: tuple[KnownModelEntry, ...] = (
    KnownModelEntry(
        id="gpt-4o",
        displayName="OpenAI GPT-4o",
        contextWindowTokens=134144,
        enabled=True,
        abilities=ModelAbilities(functionCall=True, vision=True),
    ),
    KnownModelEntry(
        id="gpt-4o-mini",
        displayName="OpenAI GPT-4o mini",
        contextWindowTokens=134144,
        enabled=True,
        abilities=ModelAbilities(functionCall=True, vision=True),
    ),
    KnownModelEntry(id="o1", displayName="OpenAI o1", contextWindowTokens=200000, abilities=_REASONING),
    KnownModelEntry(id="o1-mini", displayName="OpenAI o1-mini", contextWindowTokens=128000, enabled=True, abilities=_REASONING),
    KnownModelEntry(id="o1-preview", displayName="OpenAI o1-preview", contextWindowTokens=128000, enabled=True, abilities=_REASONING),
    KnownModelEntry(
        id="o3-mini",
        displayName="OpenAI o3-mini",
        contextWindowTokens=200000,
        enabled=True,
        abilities=ModelAbilities(functionCall=True, reasoning=True),
    ),
    KnownModelEntry(id="DeepSeek-R1", displayName="DeepSeek R1", contextWindowTokens=128000, enabled=True, abilities=_REASONING),
    KnownModelEntry(id="Meta-Llama-3.1-405B-Instruct", displayName="Meta Llama 3.1 405B", contextWindowTokens=131072, abilities=_FUNCTION_CALL),
    KnownModelEntry(id="Llama-3.3-70B-Instruct", displayName="Llama 3.3 70B", contextWindowTokens=131072, enabled=True, abilities=_FUNCTION_CALL),
    KnownModelEntry(
        id="Llama-3.2-90B-Vision-Instruct",
        displayName="Llama 3.2 90B Vision",
        contextWindowTokens=131072,
        enabled=True,
        abilities=ModelAbilities(vision=True),
    ),
    KnownModelEntry(id="Mistral-Large-2411", displayName="Mistral Large 24.11", contextWindowTokens=131072, abilities=_FUNCTION_CALL),
    KnownModelEntry(id="Mistral-small", displayName="Mistral Small", contextWindowTokens=33792, abilities=_FUNCTION_CALL),
    KnownModelEntry(id="Phi-4", displayName="Phi 4", contextWindowTokens=16384),
    KnownModelEntry(id="Phi-3.5-vision-instruct", displayName="Phi-3.5-vision", contextWindowTokens=131072, abilities=ModelAbilities(vision=True)),
)

_ENTRIES_ADAPTER = TypeAdapter(list[KnownModelEntry])


def load_known_models(path: str | Path | None = None) -> list[KnownModelEntry]:
    """Return the known model table.

    Reads a JSON array of entries from ``path`` (or the file named by
    GITHUB_MODELS_KNOWN_MODELS_FILE) when given, else the built-in table.
    """
    path = path or os.environ.get("GITHUB_MODELS_KNOWN_MODELS_FILE")
    if not path:
        return list(DEFAULT_KNOWN_MODELS)

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        entries = _ENTRIES_ADAPTER.validate_python(raw)
    except (OSError, ValueError) as exc:
        # ValidationError and JSONDecodeError are both ValueErrors
        raise ConfigurationError(f"Cannot load known models from {path}: {exc}") from exc

    logger.info("Loaded %d known models from %s", len(entries), path)
    return entries
