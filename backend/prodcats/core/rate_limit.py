from slowapi import Limiter
from prodcats.core.config import settings
from prodcats.core.logging_config import get_client_ip

# Applied to every route through SlowAPIMiddleware
limiter = Limiter(
    key_func=get_client_ip,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    enabled=settings.RATE_LIMIT_ENABLED,
)
