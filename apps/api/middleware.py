"""
thermostatd - Bearer Token Authentication

Requires `Authorization: Bearer <THERMOSTATD_TOKEN>` on every request
except the paths in THERMOSTATD_AUTH_EXEMPT_PATHS.

License:    Academic Use Only - See LICENSE file
"""

import hmac
import logging

from django.conf import settings
from django.core.exceptions import MiddlewareNotUsed
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class BearerTokenMiddleware:
    """
    Reject requests that do not carry the configured bearer token.

    With no token configured the middleware warns once and removes itself
    from the chain, leaving the API open.
    """

    prefix = "Bearer "

    def __init__(self, get_response):
        self.get_response = get_response
        self.token = getattr(settings, "THERMOSTATD_TOKEN", "")
        if not self.token:
            logger.warning(
                "Running without an auth token. Anyone that is able to connect "
                "to this device will be able to change your thermostat."
            )
            raise MiddlewareNotUsed("THERMOSTATD_TOKEN is not set")
        self.exempt_paths = frozenset(getattr(settings, "THERMOSTATD_AUTH_EXEMPT_PATHS", ()))

    def __call__(self, request):
        if request.path not in self.exempt_paths and not self.is_authorized(request):
            return JsonResponse({"error": "Unauthorized"}, status=401)
        return self.get_response(request)

    def is_authorized(self, request) -> bool:
        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header.startswith(self.prefix):
            return False

        # Constant-time compare
        presented = auth_header[len(self.prefix):].encode("utf-8")
        return hmac.compare_digest(presented, self.token.encode("utf-8"))
