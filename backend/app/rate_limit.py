"""Rate limiting configuration (avoids circular imports)."""

import os

from slowapi import Limiter
from slowapi.util import get_remote_address

# GITHUB_MODELS_NO_RATE_LIMIT=true disables limits (tests, trusted proxies)
_enabled = os.environ.get("GITHUB_MODELS_NO_RATE_LIMIT", "").lower() != "true"

limiter = Limiter(key_func=get_remote_address, enabled=_enabled)

# Upstream GitHub Models quotas are per token; these only protect this service.
MODELS_LIMIT = "30/minute"
CHAT_LIMIT = "20/minute"
