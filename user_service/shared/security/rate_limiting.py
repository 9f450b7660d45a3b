"""
Rate limiting configuration and setup.

Each application gets its own slowapi Limiter (storage and counters) and
the limits parsed from settings. ``enforce_rate_limit`` is attached as a
dependency of every API router, so the check runs on the matched route.
Exceeding the quota raises a 429 that the error handlers turn into the envelope.
"""

import logging
import time

from fastapi import HTTPException, Request
from limits import RateLimitItem, parse_many
from slowapi import Limiter
from slowapi.util import get_remote_address

from user_service.core.config import Settings

logger = logging.getLogger(__name__)

HTTP_429 = 429
RATE_LIMIT_MESSAGE = "Too many requests, please try again later"


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Each app gets its own limiter (and in-memory counters) so separately
    built apps never share quotas.
    """
    return Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def parse_rate_limits(value: str) -> list[RateLimitItem]:
    """Parse a limit string such as ``"100/15minutes"`` or ``"5/second;100/hour"``.

    Raises:
        ValueError: If the string is not a valid limit expression.
    """
    return parse_many(value)


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the caller's quota.

    Raises:
        HTTPException: 429 with a ``Retry-After`` header once any limit is exhausted.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return

    client = get_remote_address(request)
    for item in request.app.state.rate_limits:
        if limiter.limiter.hit(item, client):
            continue
        reset_at, _remaining = limiter.limiter.get_window_stats(item, client)
        retry_after = max(1, int(reset_at - time.time()))
        logger.warning(
            "Rate limit exceeded: %s %s (%s)", request.method, request.url.path, item
        )
        raise HTTPException(
            status_code=HTTP_429,
            detail=RATE_LIMIT_MESSAGE,
            headers={"Retry-After": str(retry_after)},
        )
