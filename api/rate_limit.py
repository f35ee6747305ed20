"""
Rate limiting for SKYPLOT API using SlowAPI.

Counters live in the storage named by RATE_LIMIT_STORAGE_URI (in-process
memory by default).
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.config import settings

# Initialize limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window"
)


def get_rate_limit_string() -> str:
    """
    Get rate limit string for use with @limiter.limit() decorator.

    Returns:
        str: Rate limit string (e.g., "60/minute")
    """
    return f"{settings.rate_limit_per_minute}/minute"
