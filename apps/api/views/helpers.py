"""
Shared helper functions, decorators, and utilities for views.
"""

import json
import logging
from functools import wraps

from django.http import JsonResponse, QueryDict

from apps.thermostat.runtime import get_thermostat

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class InvalidField(ValueError):
    """A request field could not be parsed."""


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------

def with_thermostat(view_func):
    """
    Pass the process Thermostat to the view as its second argument.

    Views never reach for the instance themselves, so tests can swap the
    one owned by the thermostat app config.
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        return view_func(request, get_thermostat(), *args, **kwargs)
    return _wrapped


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

def _state_response(thermostat):
    return JsonResponse(thermostat.state.to_dict())


def _api_error(exc, status=400):
    """Return `{"error": <message>}` for a failed request."""
    logger.info("Rejected request: %s", exc)
    return JsonResponse({"error": str(exc)}, status=status)


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------

def _request_fields(request) -> dict:
    """
    Collect request fields from the query string and the body.

    The body may be form-encoded or a JSON object. Body values win over
    query string values with the same name.
    """
    fields = request.GET.dict()

    if request.content_type == JSON_CONTENT_TYPE:
        try:
            payload = json.loads(request.body.decode("utf-8") or "{}")
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidField(f"Invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise InvalidField("Invalid JSON: expected an object")
        fields.update(payload)
    elif request.content_type == FORM_CONTENT_TYPE and request.body:
        fields.update(QueryDict(request.body, encoding=request.encoding).dict())

    return fields


def _is_blank(value) -> bool:
    return value is None or value == ""


def _parse_bool(value) -> bool:
    """Parse a field value to boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("1", "true", "yes", "y", "on")


def _parse_int(value, field: str) -> int:
    """Parse a field value to int, raising InvalidField on garbage."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidField(f"invalid {field}: {value!r}")
