"""
thermostatd - Thermostat Application Configuration

Builds the transports and the one Thermostat instance for this process
from Django settings. Nothing is sent to the hardware here; see
apps.thermostat.runtime.start().

License:    Academic Use Only - See LICENSE file
"""

import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class ThermostatConfig(AppConfig):
    name = 'apps.thermostat'
    label = 'thermostat'

    thermostat = None

    def ready(self):
        from .thermostat import Thermostat

        self.thermostat = Thermostat(
            build_infrared(),
            display=build_display(),
            settle_delay=settings.THERMOSTATD_SETTLE_DELAY,
        )
        logger.debug("Thermostat created: %r", self.thermostat)


def build_infrared():
    """Return the IR sender selected by THERMOSTATD_TRANSPORT."""
    from .transports import LircTransport, LoggingTransport

    kind = settings.THERMOSTATD_TRANSPORT
    if kind == "lirc":
        return LircTransport(
            settings.THERMOSTATD_LIRC_SOCKET,
            settings.THERMOSTATD_LIRC_REMOTE,
            timeout=settings.THERMOSTATD_LIRC_TIMEOUT,
        )
    if kind == "log":
        return LoggingTransport(settings.THERMOSTATD_LIRC_REMOTE)

    raise ImproperlyConfigured(
        f"THERMOSTATD_TRANSPORT must be 'lirc' or 'log', got {kind!r}"
    )


def build_display():
    """Return the LCD writer, or None when no display is attached."""
    if not settings.THERMOSTATD_LCD_ENABLED:
        return None

    from .transports import CharacterDisplay, build_character_lcd

    columns = settings.THERMOSTATD_LCD_COLUMNS
    lcd = build_character_lcd(settings.THERMOSTATD_LCD_PINS, columns=columns)
    return CharacterDisplay(lcd, columns=columns)
