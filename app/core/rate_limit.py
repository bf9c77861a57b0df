"""
Shared rate limiter.

Routers decorate endpoints with ``limiter.limit(...)``; the same instance is
registered on ``app.state.limiter`` in app.main. Disabled entirely when
``RATE_LIMIT_ENABLED`` is false.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

DEFAULT_LIMIT = f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW}seconds"
