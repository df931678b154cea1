"""Tests for the app-owned Thermostat and startup reset."""

from django.apps import apps

from apps.thermostat.runtime import get_thermostat, start
from apps.thermostat.thermostat import Thermostat
from apps.thermostat.transports import LoggingTransport


def test_app_config_builds_one_thermostat() -> None:
    thermostat = get_thermostat()

    assert isinstance(thermostat, Thermostat)
    assert thermostat is apps.get_app_config("thermostat").thermostat
    assert isinstance(thermostat.infrared, LoggingTransport)
    assert thermostat.display is None
    assert thermostat.settle_delay == 0


def test_start_resets_the_unit(installed_thermostat, events) -> None:
    installed_thermostat.set_target_temperature(80)
    events.clear()

    assert start() is installed_thermostat
    assert installed_thermostat.state.target_temperature == 72
    assert events == [("send", "turn-off")]


def test_start_survives_transport_failure(installed_thermostat, infrared, caplog) -> None:
    infrared.fail_on.add("turn-off")

    start()

    assert "Could not reset thermostat on startup" in caplog.text
