"""
Rate limiting configuration using SlowAPI.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.config import get_settings
from app.core.auth import API_KEY_HEADER_NAME


def _get_rate_limit_key(request: Request) -> str:
    """Rate limit per API key when one is sent, otherwise per client IP."""
    api_key = request.headers.get(API_KEY_HEADER_NAME)
    if api_key:
        return f"api_key:{api_key[:8]}..."
    return get_remote_address(request)


def get_rate_limit_string() -> str:
    """Get the default rate limit string from settings."""
    settings = get_settings()
    return f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW} seconds"


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=[get_rate_limit_string()]
)
