"""
thermostatd - Rate Limiting Decorators

Every state change pulses the IR transmitter and may block its request
thread for the settle delay, so mutating endpoints are rate limited:
    - ratelimit_commands: RATELIMIT_COMMANDS (default 30/m) per client IP

License:    Academic Use Only - See LICENSE file
"""

from functools import wraps
from django.conf import settings
from django.http import JsonResponse
from django_ratelimit.decorators import ratelimit


def get_client_ip(request):
    """Extract client IP from request, handling proxies."""
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def ratelimit_commands(view_func):
    """Rate limit: PUT/PATCH requests per client IP. GET is never limited."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        decorated = ratelimit(
            key=lambda group, req: get_client_ip(req),
            rate=getattr(settings, "RATELIMIT_COMMANDS", "30/m"),
            method=["PUT", "PATCH"],
            block=True,
        )(view_func)
        return decorated(request, *args, **kwargs)
    return wrapper


def ratelimited_error(request, exception=None):
    """Custom view for rate limit exceeded errors."""
    return JsonResponse(
        {
            "error": "rate_limit_exceeded",
            "message": "Too many requests. Please try again later.",
        },
        status=429,
    )
