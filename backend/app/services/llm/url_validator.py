"""SSRF protection for an overridden GitHub Models base URL."""

from __future__ import annotations

import ipaddress
import os
import socket
from urllib.parse import urlparse

# Hosts that serve the GitHub Models inference API
ALLOWED_HOSTS = ("models.inference.ai.azure.com", "models.github.ai")


class SSRFError(ValueError):
    """Raised when a URL fails SSRF validation."""


def validate_base_url(url: str) -> None:
    """Validate a base URL before a provider is built with it.

    Rules:
    - The scheme must be https.
    - The host must be one of ALLOWED_HOSTS (or a subdomain) unless
      ALLOW_PRIVATE_URLS is set, which is meant for local proxies in tests.
    - Resolved private/reserved addresses are blocked unless
      ALLOW_PRIVATE_URLS is set.
    """
    parsed = urlparse(url)
    allow_private = os.environ.get("ALLOW_PRIVATE_URLS", "").lower() == "true"

    if parsed.scheme != "https" and not allow_private:
        raise SSRFError(f"GitHub Models base URL must use https, got '{parsed.scheme}'")

    hostname = (parsed.hostname or "").lower()
    if not hostname:
        raise SSRFError("URL has no hostname")

    if allow_private:
        return

    if not any(hostname == h or hostname.endswith(f".{h}") for h in ALLOWED_HOSTS):
        raise SSRFError(
            f'Base URL hostname "{hostname}" is not allowed. '
            f"Allowed hosts: {', '.join(ALLOWED_HOSTS)}"
        )

    try:
        addr_infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror:
        raise SSRFError(f"Cannot resolve hostname: {hostname}")

    for _, _, _, _, sockaddr in addr_infos:
        ip_str = sockaddr[0]
        try:
            addr = ipaddress.ip_address(ip_str)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            raise SSRFError(f"URL resolves to private/reserved address ({ip_str})")
