"""GitHub token extraction from request headers."""

from __future__ import annotations

from fastapi import Request


def extract_github_token(request: Request) -> str | None:
    """Extract the GitHub PAT from Authorization: Bearer or X-GitHub-Token."""
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip() or None
    return request.headers.get("X-GitHub-Token") or None
