"""
thermostatd - JSON API Endpoints (v1)

This module provides the v1 thermostat endpoints:
    - state: GET the current state, PATCH several fields at once
    - power: PUT on/off
    - mode: PUT the operating mode
    - temperature: PUT the target temperature
    - fan_speed: PUT the fan speed

Fields are read from the query string and a form-encoded or JSON body.
Every success returns the resulting state; every failure returns
`{"error": "..."}` with status 400.

License:    Academic Use Only - See LICENSE file
"""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.thermostat.exceptions import ThermostatError
from apps.thermostat.state import FanSpeed, Mode

from ..ratelimits import ratelimit_commands
from .helpers import (
    InvalidField,
    _api_error,
    _is_blank,
    _parse_bool,
    _parse_int,
    _request_fields,
    _state_response,
    with_thermostat,
)


@csrf_exempt
@require_http_methods(["GET", "PATCH"])
@ratelimit_commands
@with_thermostat
def state(request, thermostat):
    """
    GET /v1/state
        Return the current state.

    PATCH /v1/state
        Fields (all optional, blank means unchanged):
            powered_on, target_temperature, current_mode, fan_speed

        The fields are applied to a copy of the current state and the copy
        is committed as a whole. Switching the unit on runs the settle
        protocol.

    Response:
    {
        "powered_on": true,
        "current_mode": "COOL",
        "fan_speed": "AUTO",
        "target_temperature": 72,
        "current_temperature": 0
    }
    """
    if request.method == "GET":
        return _state_response(thermostat)

    try:
        fields = _request_fields(request)
        draft = thermostat.state

        power = fields.get("powered_on")
        if not _is_blank(power):
            draft.powered_on = _parse_bool(power)

        temp = fields.get("target_temperature")
        if not _is_blank(temp):
            draft.target_temperature = _parse_int(temp, "target_temperature")

        mode = fields.get("current_mode")
        if not _is_blank(mode):
            draft.current_mode = Mode.parse(mode)

        speed = fields.get("fan_speed")
        if not _is_blank(speed):
            draft.fan_speed = FanSpeed.parse(speed)

        thermostat.set_state(draft)
    except (InvalidField, ThermostatError) as e:
        return _api_error(e)

    return _state_response(thermostat)


@csrf_exempt
@require_http_methods(["PUT"])
@ratelimit_commands
@with_thermostat
def power(request, thermostat):
    """
    PUT /v1/power

    Body: on=true|false
    """
    try:
        fields = _request_fields(request)
        thermostat.set_power(_parse_bool(fields.get("on")))
    except (InvalidField, ThermostatError) as e:
        return _api_error(e)

    return _state_response(thermostat)


@csrf_exempt
@require_http_methods(["PUT"])
@ratelimit_commands
@with_thermostat
def mode(request, thermostat):
    """
    PUT /v1/mode

    Body: mode=COOL|DRY|HEAT|FAN
    """
    try:
        fields = _request_fields(request)
        thermostat.set_mode(Mode.parse(fields.get("mode")))
    except (InvalidField, ThermostatError) as e:
        return _api_error(e)

    return _state_response(thermostat)


@csrf_exempt
@require_http_methods(["PUT"])
@ratelimit_commands
@with_thermostat
def temperature(request, thermostat):
    """
    PUT /v1/temperature

    Body: temperature=<even integer, Fahrenheit>
    """
    try:
        fields = _request_fields(request)
        temp = _parse_int(fields.get("temperature"), "temperature")
        thermostat.set_target_temperature(temp)
    except (InvalidField, ThermostatError) as e:
        return _api_error(e)

    return _state_response(thermostat)


@csrf_exempt
@require_http_methods(["PUT"])
@ratelimit_commands
@with_thermostat
def fan_speed(request, thermostat):
    """
    PUT /v1/fan_speed

    Body: speed=AUTO|QUIET|LOW|MEDIUM|HIGH
    """
    try:
        fields = _request_fields(request)
        thermostat.set_fan_speed(FanSpeed.parse(fields.get("speed")))
    except (InvalidField, ThermostatError) as e:
        return _api_error(e)

    return _state_response(thermostat)
