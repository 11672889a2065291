"""
API Gateway Factory

Provides a single entry point for obtaining the process-wide gateway.
The base URL is resolved once from configuration here and handed to the
gateway constructor.

Usage:
    from foodapp.services.gateway import get_gateway

    gateway = get_gateway()
    restaurants = await gateway.call("/restaurants")

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache

from foodapp.core.config import get_settings
from foodapp.services.gateway.base import (
    RequestSpec,
    ResponseOutcome,
    classify_response,
)
from foodapp.services.gateway.client import ApiGateway, merge_headers, serialize_body
from foodapp.services.session import get_session_store

logger = logging.getLogger(__name__)


@lru_cache()
def get_gateway() -> ApiGateway:
    """
    Get the configured gateway instance.

    The cached gateway owns one httpx.AsyncClient, which is bound to the
    event loop that first uses it. Call close_gateway() before that loop
    ends.

    Returns:
        ApiGateway: Gateway bound to the configured base URL and
        the shared session store
    """
    settings = get_settings()
    logger.info(
        f"Gateway: {settings.api_base} "
        f"({settings.env_mode.value} mode, host={settings.client_hostname})"
    )
    return ApiGateway(
        settings.api_base,
        get_session_store(),
        timeout=settings.request_timeout,
    )


def reset_gateway() -> None:
    """
    Clear the cached gateway instance.

    Useful for testing or when configuration changes at runtime.
    The next call to get_gateway() will create a new instance. The
    dropped gateway's client is not closed; use close_gateway() from
    inside the running loop for that.
    """
    get_gateway.cache_clear()
    logger.debug("Gateway cache cleared")


async def close_gateway() -> None:
    """Close the cached gateway's connection pool, if any, and clear the cache."""
    if get_gateway.cache_info().currsize:
        await get_gateway().aclose()
    reset_gateway()


__all__ = [
    "get_gateway",
    "reset_gateway",
    "close_gateway",
    "ApiGateway",
    "RequestSpec",
    "ResponseOutcome",
    "classify_response",
    "merge_headers",
    "serialize_body",
]
