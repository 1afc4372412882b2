from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from skillswap.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def rate_limit(limit: str | None = None):
    """Per-client limit for a route; ``limit`` overrides the service default."""
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def passthrough(func):
        return func

    return passthrough


def explore_rate_limit():
    return rate_limit(settings.explore_rate_limit)
