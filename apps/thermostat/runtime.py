"""
Access to the process-wide Thermostat owned by the thermostat app.
"""

import logging

from django.apps import apps

from .exceptions import TransportFailure

logger = logging.getLogger(__name__)


def get_thermostat():
    """Return the Thermostat built by ThermostatConfig.ready()."""
    return apps.get_app_config("thermostat").thermostat


def start():
    """
    Push the default state to the unit. Called once by the WSGI/ASGI
    entrypoints after the application is loaded.

    A failure is logged and the server still starts, so the API stays
    reachable to retry.
    """
    thermostat = get_thermostat()
    try:
        thermostat.reset()
    except TransportFailure as exc:
        logger.error("Could not reset thermostat on startup: %s", exc)
    return thermostat
