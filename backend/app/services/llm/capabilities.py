"""Keyword rules for inferring model capabilities from vendor metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

Capability = Literal["functionCall", "vision", "reasoning"]
MatchField = Literal["name", "description"]

CAPABILITIES: tuple[Capability, ...] = ("functionCall", "vision", "reasoning")


@dataclass(frozen=True)
class CapabilityRule:
    """A capability is detected when ``keyword`` occurs in the given field."""

    capability: Capability
    field: MatchField
    keyword: str

    def matches(self, name: str, description: str) -> bool:
        text = name if self.field == "name" else description
        return self.keyword.lower() in (text or "").lower()


# Order matters only for rules_for(); detection is OR across all rules.
DEFAULT_CAPABILITY_RULES: tuple[CapabilityRule, ...] = (
    CapabilityRule("functionCall", "description", "function"),
    CapabilityRule("functionCall", "description", "tool"),
    CapabilityRule("vision", "description", "vision"),
    CapabilityRule("reasoning", "name", "deepseek-r1"),
    CapabilityRule("reasoning", "name", "o1"),
    CapabilityRule("reasoning", "name", "o3"),
)


def rules_for(
    capability: Capability,
    rules: Iterable[CapabilityRule] = DEFAULT_CAPABILITY_RULES,
) -> list[CapabilityRule]:
    """Return the rules that can set ``capability``, in declaration order."""
    return [r for r in rules if r.capability == capability]


def detect_capabilities(
    name: str,
    description: str,
    rules: Iterable[CapabilityRule] = DEFAULT_CAPABILITY_RULES,
) -> set[Capability]:
    """Return every capability with at least one matching rule."""
    return {r.capability for r in rules if r.matches(name, description)}
