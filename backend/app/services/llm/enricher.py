"""Join the GitHub Models list against local metadata and flag capabilities."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from app.models.github_models import (
    EnrichedModelCard,
    KnownModelEntry,
    RemoteModelDescriptor,
)
from app.services.llm.capabilities import (
    DEFAULT_CAPABILITY_RULES,
    CapabilityRule,
    detect_capabilities,
)

logger = logging.getLogger(__name__)


def find_known_model(
    name: str, known_models: Iterable[KnownModelEntry]
) -> KnownModelEntry | None:
    """Return the first entry whose id equals ``name`` ignoring case."""
    key = name.lower()
    for entry in known_models:
        if entry.id.lower() == key:
            return entry
    return None


def enrich_model(
    remote: RemoteModelDescriptor,
    known_models: Sequence[KnownModelEntry],
    rules: Iterable[CapabilityRule] = DEFAULT_CAPABILITY_RULES,
) -> EnrichedModelCard:
    name = remote.name or ""
    description = remote.description or ""
    known = find_known_model(name, known_models)
    abilities = known.abilities if known else None

    detected = detect_capabilities(name, description, rules)

    return EnrichedModelCard(
        id=name,
        displayName=remote.friendly_name or "",
        description=description,
        enabled=bool(known and known.enabled),
        contextWindowTokens=known.contextWindowTokens if known else None,
        functionCall="functionCall" in detected or bool(abilities and abilities.functionCall),
        vision="vision" in detected or bool(abilities and abilities.vision),
        reasoning="reasoning" in detected or bool(abilities and abilities.reasoning),
    )


def enrich_models(
    remote_models: Iterable[RemoteModelDescriptor],
    known_models: Sequence[KnownModelEntry],
    rules: Iterable[CapabilityRule] = DEFAULT_CAPABILITY_RULES,
) -> list[EnrichedModelCard]:
    """Build one card per remote model, preserving input order.

    Entries without a ``name`` cannot be called through the API, so they are
    skipped with a warning rather than emitted with an empty id.
    """
    rules = tuple(rules)
    cards: list[EnrichedModelCard] = []
    for remote in remote_models:
        if not remote.name:
            logger.warning("Skipping GitHub model without a name (id=%r)", remote.id)
            continue
        cards.append(enrich_model(remote, known_models, rules))

    logger.debug("Enriched %d GitHub models", len(cards))
    return cards
