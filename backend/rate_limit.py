"""
Per-client rate limiting for the search endpoint.

The limit string comes from settings.search_rate_limit. Set
MODELDEX_RATE_LIMIT_ENABLED=false to turn limiting off (tests, CI).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from backend.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
