"""Factories for building clients from arguments or settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .base import ProxyConfig
from .client import CryptopiaClient

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)


def create_client(
    api_key: str | None = None,
    api_secret: str | None = None,
    *,
    hostname: str | None = None,
    timeout_ms: int | None = None,
    proxy: dict[str, Any] | None = None,
    **options: Any,
) -> CryptopiaClient:
    """Create a Cryptopia client.

    Args:
        api_key: API key (omit for public-only use)
        api_secret: Base64 API secret (omit for public-only use)
        hostname: API host override
        timeout_ms: Request timeout in milliseconds
        proxy: Proxy configuration (url, username, password)
        **options: Passed through to CryptopiaClient (user_agent, executor)

    Returns:
        Configured client

    Raises:
        ValueError: If only one of api_key and api_secret is given
    """
    if bool(api_key) != bool(api_secret):
        raise ValueError("api_key and api_secret must be provided together")

    proxy_config = None
    if proxy:
        proxy_config = ProxyConfig(
            url=proxy.get("url"),
            username=proxy.get("username"),
            password=proxy.get("password"),
        )

    return CryptopiaClient(
        api_key,
        api_secret,
        hostname,
        timeout_ms,
        proxy=proxy_config,
        **options,
    )


def create_client_from_settings(settings: "Settings", **options: Any) -> CryptopiaClient:
    """Create a client from loaded settings."""
    api_key = api_secret = None
    if settings.credentials:
        api_key = settings.credentials.api_key.get_secret_value()
        api_secret = settings.credentials.api_secret.get_secret_value()
    else:
        logger.debug("No credentials configured, client limited to public endpoints")

    proxy = None
    if settings.proxy.enabled and settings.proxy.url:
        proxy = {
            "url": settings.proxy.url,
            "username": settings.proxy.username,
            "password": settings.proxy.password.get_secret_value() if settings.proxy.password else None,
        }

    return create_client(
        api_key,
        api_secret,
        hostname=settings.hostname,
        timeout_ms=settings.timeout_ms,
        proxy=proxy,
        user_agent=settings.user_agent,
        **options,
    )
