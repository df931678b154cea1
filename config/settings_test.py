"""
thermostatd - Test Settings

No hardware: IR keys are only logged, there is no settle wait and no LCD.
"""

from .settings import *  # noqa: F401,F403

THERMOSTATD_TOKEN = "test-token"
THERMOSTATD_TRANSPORT = "log"
THERMOSTATD_SETTLE_DELAY = 0
THERMOSTATD_LCD_ENABLED = False

RATELIMIT_ENABLE = False
