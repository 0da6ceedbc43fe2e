"""Provider error taxonomy and translation from openai SDK exceptions."""

from __future__ import annotations

from typing import Any

import openai


class ProviderRuntimeError(Exception):
    """Base error surfaced to API callers with an HTTP status."""

    error_type = "ProviderBizError"
    status_code = 502

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_error(self) -> dict[str, Any]:
        return {
            "type": self.error_type,
            "message": self.message,
            "status": self.status_code,
        }


class AuthenticationError(ProviderRuntimeError):
    """The GitHub token was rejected. Never retried."""

    error_type = "InvalidGithubToken"
    status_code = 401


class ProviderError(ProviderRuntimeError):
    error_type = "ProviderBizError"
    status_code = 502


class ConfigurationError(ProviderRuntimeError):
    """Raised before any network call when required settings are missing."""

    error_type = "InvalidProviderConfig"
    status_code = 400


def map_openai_error(exc: Exception) -> ProviderRuntimeError:
    """Map an openai SDK exception to the provider error taxonomy."""
    if isinstance(exc, ProviderRuntimeError):
        return exc

    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationError(
            f"GitHub token rejected: {exc}", status_code=exc.status_code
        )

    if isinstance(exc, openai.RateLimitError):
        return ProviderError(f"GitHub Models rate limit exceeded: {exc}", status_code=429)

    if isinstance(exc, openai.APIConnectionError):
        return ProviderError(f"Could not reach GitHub Models: {exc}")

    if isinstance(exc, openai.APIError):
        return ProviderError(f"GitHub Models request failed: {exc}")

    return ProviderError(f"Unexpected provider error: {exc}")
