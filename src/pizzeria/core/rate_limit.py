# src/pizzeria/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from pizzeria.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def store_rate_limit() -> str:
    """Limit für schreibende Store-Endpoints, wird pro Request aus den Settings gelesen."""
    settings = get_settings()
    return f"{settings.rate_limit_requests}/{settings.rate_limit_window_seconds} seconds"
