"""
Views package for the API app.

Views are organized into submodules:
  - helpers: Shared request parsing, responses, and decorators
  - api: JSON v1 thermostat endpoints
"""

from .api import (
    fan_speed,
    mode,
    power,
    state,
    temperature,
)

from .helpers import (
    InvalidField,
    with_thermostat,
)

# Re-export ratelimited_error from ratelimits (used as RATELIMIT_VIEW)
from ..ratelimits import ratelimited_error

__all__ = [
    # API
    "fan_speed",
    "mode",
    "power",
    "state",
    "temperature",
    # Helpers
    "InvalidField",
    "with_thermostat",
    # Ratelimits
    "ratelimited_error",
]
