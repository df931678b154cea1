"""
thermostatd - Thermostat State

This module defines the value type describing what the air conditioner
should be doing:
    - Mode: operating mode (COOL, DRY, HEAT, FAN)
    - FanSpeed: fan speed (AUTO, QUIET, LOW, MEDIUM, HIGH)
    - State: power, mode, fan speed and temperatures, with validation and
      the mapping from a state to the LIRC command that produces it

License:    Academic Use Only - See LICENSE file
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .exceptions import InvalidEnum, InvalidState

# Sent instead of a settings command whenever the unit is powered off
TURN_OFF_COMMAND = "turn-off"

# Target temperature limits in Fahrenheit, inclusive
HEAT_TEMPERATURE_RANGE = (60, 76)
DEFAULT_TEMPERATURE_RANGE = (64, 88)


class Mode(str, Enum):
    """Operating mode of the unit."""

    COOL = "COOL"
    DRY = "DRY"
    HEAT = "HEAT"
    FAN = "FAN"

    @classmethod
    def parse(cls, token: str) -> Mode:
        """Return the mode for a wire token such as "HEAT"."""
        try:
            return cls(token)
        except ValueError:
            raise InvalidEnum("invalid mode") from None


class FanSpeed(str, Enum):
    """Fan speed, from QUIET (1/4) to HIGH (4/4), or AUTO."""

    AUTO = "AUTO"
    QUIET = "QUIET"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, token: str) -> FanSpeed:
        """Return the fan speed for a wire token such as "LOW"."""
        try:
            return cls(token)
        except ValueError:
            raise InvalidEnum("invalid fan speed") from None


# LIRC key fragments for each member; must cover every member
MODE_TOKENS = MappingProxyType({
    Mode.HEAT: "heat",
    Mode.COOL: "cool",
    Mode.DRY: "dry",
    Mode.FAN: "fan",
})

FAN_SPEED_TOKENS = MappingProxyType({
    FanSpeed.AUTO: "auto",
    FanSpeed.HIGH: "high",
    FanSpeed.MEDIUM: "medium",
    FanSpeed.LOW: "low",
    FanSpeed.QUIET: "quiet",
})


@dataclass
class State:
    """
    Desired state of the air conditioner.

    Attributes:
        powered_on: True if the unit is on
        current_mode: Mode the unit runs in
        fan_speed: Fan speed
        target_temperature: Target temperature in Fahrenheit
        current_temperature: Room temperature in Fahrenheit. Stored for
            clients but never validated or transmitted.

    The setters follow copy-validate-commit: the change is applied to a
    copy first and the receiver is only touched when the copy is valid.
    """

    powered_on: bool = False
    current_mode: Mode = Mode.COOL
    fan_speed: FanSpeed = FanSpeed.AUTO
    target_temperature: int = 72
    current_temperature: int = 0

    def is_valid(self) -> bool:
        """Return True if mode, fan speed and target temperature are legal."""
        if not isinstance(self.current_mode, Mode) or self.current_mode not in MODE_TOKENS:
            return False
        if not isinstance(self.fan_speed, FanSpeed) or self.fan_speed not in FAN_SPEED_TOKENS:
            return False

        if self.current_mode is Mode.HEAT:
            floor, ceiling = HEAT_TEMPERATURE_RANGE
        else:
            floor, ceiling = DEFAULT_TEMPERATURE_RANGE

        temp = self.target_temperature
        if isinstance(temp, bool) or not isinstance(temp, int):
            return False
        return floor <= temp <= ceiling and temp % 2 == 0

    def to_command(self) -> str:
        """
        Return the LIRC command that puts the unit in this state.

        Examples: "cool-auto-72F", "fan-high" (fan-only never carries a
        temperature), "turn-off".

        Raises:
            InvalidState: if the state is not valid
        """
        if not self.is_valid():
            raise InvalidState()

        if not self.powered_on:
            return TURN_OFF_COMMAND

        cmd = f"{MODE_TOKENS[self.current_mode]}-{FAN_SPEED_TOKENS[self.fan_speed]}"
        if self.current_mode is not Mode.FAN:
            cmd += f"-{self.target_temperature}F"
        return cmd

    def to_power_on_command(self) -> str:
        """
        Return the "<mode>-on" command sent before the settings command
        when the unit is switched on.

        Raises:
            InvalidState: if the state is not valid
        """
        if not self.is_valid():
            raise InvalidState()

        if not self.powered_on:
            return TURN_OFF_COMMAND

        return f"{MODE_TOKENS[self.current_mode]}-on"

    def set_power(self, power: bool) -> None:
        self._commit(powered_on=power)

    def set_mode(self, mode: Mode) -> None:
        self._commit(current_mode=mode)

    def set_fan_speed(self, speed: FanSpeed) -> None:
        self._commit(fan_speed=speed)

    def set_target_temperature(self, temp: int) -> None:
        self._commit(target_temperature=temp)

    def _commit(self, **changes) -> None:
        draft = dataclasses.replace(self, **changes)
        if not draft.is_valid():
            raise InvalidState()

        for name, value in changes.items():
            setattr(self, name, value)

    def copy(self) -> State:
        return dataclasses.replace(self)

    def to_dict(self) -> dict:
        """Return the JSON representation used by the API."""
        return {
            "powered_on": self.powered_on,
            "current_mode": self.current_mode.value,
            "fan_speed": self.fan_speed.value,
            "target_temperature": self.target_temperature,
            "current_temperature": self.current_temperature,
        }
