"""
Rate limiting configuration.

Uses slowapi to enforce per-endpoint rate limits, keyed by client address.
Only the public login endpoint is limited; rejected requests surface
through the shared error handlers as a ``RateLimitExceeded`` envelope.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

LOGIN_RATE_LIMIT = settings.rate_limit_login

limiter = Limiter(key_func=get_remote_address)
