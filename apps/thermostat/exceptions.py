"""
Error types raised by the thermostat core.

The message of every error is safe to return to an API client as-is.
"""


class ThermostatError(Exception):
    """Base class for every error the thermostat core raises."""


class InvalidState(ThermostatError):
    """A candidate State failed validation. Committed state is untouched."""

    def __init__(self, message: str = "invalid state"):
        super().__init__(message)


class InvalidEnum(ThermostatError, ValueError):
    """A mode or fan speed token is not part of its enumeration."""


class TransportFailure(ThermostatError):
    """The infrared sender or the display writer failed.

    The State may already have been committed when this is raised.
    """
