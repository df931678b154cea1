"""
thermostatd - Thermostat Controller

The Thermostat owns the single committed State of the unit and turns every
change into the infrared commands that reproduce it on the hardware.

Switching the unit on is a two-step protocol: the "<mode>-on" key is sent
first, the unit is given a settle delay, and only then is the full settings
key sent. HEAT skips the "-on" key because the heat key already starts the
unit from cold.

License:    Academic Use Only - See LICENSE file
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .exceptions import InvalidState, TransportFailure
from .state import FanSpeed, Mode, State
from .transports import DisplayWriter, InfraredSender, pad_line

logger = logging.getLogger(__name__)

# Seconds between the power-on key and the settings key
DEFAULT_SETTLE_DELAY = 1.0


class Thermostat:
    """
    Active thermostat that can receive commands.

    Attributes:
        infrared: Sender used for every IR key
        display: Optional two-line display mirroring the state
        settle_delay: Seconds to wait after a power-on key

    All mutators run under one lock, so concurrent callers are serialised
    for the whole validate-commit-send sequence (settle delay included).
    The committed state is replaced before commands go out, so `state` may
    show a change whose commands are still being sent.

    A transport failure is raised to the caller after the state has been
    committed; the state is not rolled back.
    """

    def __init__(self, infrared: InfraredSender, display: Optional[DisplayWriter] = None,
                 settle_delay: float = DEFAULT_SETTLE_DELAY,
                 sleep: Callable[[float], None] = time.sleep):
        self.infrared = infrared
        self.display = display
        self.settle_delay = settle_delay
        self._sleep = sleep
        self._state = State()
        self._lock = threading.Lock()

    @property
    def state(self) -> State:
        """A copy of the committed state."""
        return self._state.copy()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Go back to the default state and push it to the unit."""
        with self._lock:
            self._state = State()
            logger.info("Thermostat reset to defaults")
            self._send_current_state()

    def set_power(self, power: bool) -> None:
        """Turn the unit on or off."""
        with self._lock:
            self._state.set_power(power)

            if power:
                self._send_on_state()
                self._sleep(self.settle_delay)

            self._send_current_state()

    def set_mode(self, mode: Mode) -> None:
        with self._lock:
            self._state.set_mode(mode)
            self._send_current_state()

    def set_fan_speed(self, speed: FanSpeed) -> None:
        with self._lock:
            self._state.set_fan_speed(speed)
            self._send_current_state()

    def set_target_temperature(self, temp: int) -> None:
        with self._lock:
            self._state.set_target_temperature(temp)
            self._send_current_state()

    def set_state(self, state: State) -> None:
        """
        Replace the whole state at once.

        The settle protocol only runs when this switches the unit from off
        to on.

        Raises:
            InvalidState: if `state` is not valid (nothing is committed)
            TransportFailure: if a command could not be delivered
        """
        candidate = state.copy()
        if not candidate.is_valid():
            raise InvalidState()

        with self._lock:
            send_on = not self._state.powered_on and candidate.powered_on
            self._state = candidate

            if send_on:
                self._send_on_state()
                self._sleep(self.settle_delay)

            self._send_current_state()

    # ------------------------------------------------------------------
    # Command sequencing (callers hold the lock)
    # ------------------------------------------------------------------

    def _send_command(self, code: str) -> None:
        try:
            self.infrared.send(code)
        except TransportFailure as exc:
            logger.error("Failed to send '%s': %s", code, exc)
            raise
        logger.info("Sent '%s'", code)

    def _send_on_state(self) -> None:
        if self._state.current_mode is Mode.HEAT:
            return

        self._send_command(self._state.to_power_on_command())

    def _send_current_state(self) -> None:
        self._send_command(self._state.to_command())

        if self.display is not None:
            self._update_display()

    def _update_display(self) -> None:
        state = self._state
        columns = self.display.columns
        if state.powered_on:
            line1 = f"Temp: {state.target_temperature}F ({state.current_mode.value})"
            line2 = f"Fan: {state.fan_speed.value}"
        else:
            line1, line2 = "Thermostat Off", ""

        try:
            self.display.write_lines(pad_line(line1, columns), pad_line(line2, columns))
        except TransportFailure as exc:
            logger.error("Failed to update display: %s", exc)
            raise

    def __repr__(self) -> str:
        return f"Thermostat(infrared={self.infrared!r}, state={self._state!r})"
