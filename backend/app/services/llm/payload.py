"""Outbound chat payload adjustments for GitHub Models."""

from __future__ import annotations

from typing import Any

# o1/o3 models reject sampling parameters and do not stream.
REASONING_MODEL_PREFIXES = ("o1", "o3")


def is_reasoning_model(model: str) -> bool:
    return model.startswith(REASONING_MODEL_PREFIXES)


def prune_reasoning_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Reset sampling parameters and re-role system messages as developer."""
    messages = [
        {**m, "role": "developer" if m.get("role") == "system" else m.get("role")}
        for m in payload.get("messages", [])
    ]
    return {
        **payload,
        "messages": messages,
        "frequency_penalty": 0,
        "presence_penalty": 0,
        "temperature": 1,
        "top_p": 1,
    }


def handle_chat_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Return the payload actually sent upstream. The input is not modified."""
    if is_reasoning_model(payload["model"]):
        return {**prune_reasoning_payload(payload), "stream": False}

    stream = payload.get("stream")
    return {**payload, "stream": True if stream is None else stream}
