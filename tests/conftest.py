"""Shared fixtures: recording transports and a Thermostat wired to them."""

import pytest
from django.apps import apps

from apps.thermostat.exceptions import TransportFailure
from apps.thermostat.thermostat import Thermostat

AUTH_HEADER = "Bearer test-token"


class RecordingInfrared:
    """IR sender that records keys into a shared event log."""

    def __init__(self, events: list):
        self.events = events
        self.fail_on: set[str] = set()

    def send(self, code: str) -> None:
        if code in self.fail_on:
            raise TransportFailure(f"lircd rejected '{code}'")
        self.events.append(("send", code))


class RecordingDisplay:
    """Display writer that records lines into a shared event log."""

    columns = 16

    def __init__(self, events: list):
        self.events = events
        self.failing = False

    def write_lines(self, line1: str, line2: str) -> None:
        if self.failing:
            raise TransportFailure("display write failed: i2c timeout")
        self.events.append(("display", line1, line2))


def sent_codes(events: list) -> list[str]:
    """Return only the IR keys from an event log."""
    return [event[1] for event in events if event[0] == "send"]


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def infrared(events) -> RecordingInfrared:
    return RecordingInfrared(events)


@pytest.fixture
def display(events) -> RecordingDisplay:
    return RecordingDisplay(events)


@pytest.fixture
def sleep(events):
    def _sleep(seconds: float) -> None:
        events.append(("sleep", seconds))
    return _sleep


@pytest.fixture
def thermostat(infrared, sleep) -> Thermostat:
    return Thermostat(infrared, settle_delay=1.0, sleep=sleep)


@pytest.fixture
def installed_thermostat(thermostat):
    """Make `thermostat` the instance the API views receive."""
    config = apps.get_app_config("thermostat")
    previous = config.thermostat
    config.thermostat = thermostat
    yield thermostat
    config.thermostat = previous


@pytest.fixture
def api_client(client, installed_thermostat):
    """Django test client that sends the configured bearer token."""
    client.defaults["HTTP_AUTHORIZATION"] = AUTH_HEADER
    return client


@pytest.fixture
def sent(events):
    """Callable returning the IR keys sent so far."""
    return lambda: sent_codes(events)
