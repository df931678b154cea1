"""
thermostatd - Hardware Transports

The Thermostat talks to the outside world through two small interfaces:
    - InfraredSender: transmits a named key of the configured remote
    - DisplayWriter: writes two lines on a character display (optional)

Implementations:
    - LircTransport: sends keys through a running lircd daemon
    - LoggingTransport: logs keys instead of sending them (no hardware)
    - CharacterDisplay: drives an HD44780 16x2 LCD via Adafruit CircuitPython

License:    Academic Use Only - See LICENSE file
"""

from __future__ import annotations

import logging
import socket
from typing import Iterable, Protocol

from .exceptions import TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_LIRC_SOCKET = "/var/run/lirc/lircd"
DEFAULT_LIRC_REMOTE = "fujitsu_heat_ac"

# Default HD44780 wiring (BCM numbering): RS, EN, D4-D7
DEFAULT_LCD_PINS = (21, 20, 19, 13, 26, 6)
DEFAULT_LCD_COLUMNS = 16


class InfraredSender(Protocol):
    def send(self, code: str) -> None:
        ...


class DisplayWriter(Protocol):
    columns: int

    def write_lines(self, line1: str, line2: str) -> None:
        ...


# ---------------------------------------------------------------------------
# Infrared
# ---------------------------------------------------------------------------

def read_lircd_reply(lines: Iterable[str], command: str) -> tuple[bool, str]:
    """
    Consume lircd output until the reply block for `command` is found.

    lircd answers every request with:
        BEGIN
        <command>
        SUCCESS | ERROR
        [DATA
         <n>
         <n lines of message>]
        END

    Blocks for other commands (SIGHUP broadcasts) and button-press
    broadcasts outside any block are skipped.

    Returns:
        (succeeded, message) where message is the DATA payload, if any.
    """
    block = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if block is None:
            if line == "BEGIN":
                block = []
            continue

        if line != "END":
            block.append(line)
            continue

        if block and block[0] == command:
            return _reply_result(block[1:])
        block = None

    raise TransportFailure("lircd closed the connection without replying")


def _reply_result(body: list[str]) -> tuple[bool, str]:
    succeeded = bool(body) and body[0] == "SUCCESS"
    message = ""
    if "DATA" in body:
        start = body.index("DATA") + 1
        try:
            count = int(body[start])
        except (IndexError, ValueError):
            count = 0
        message = "\n".join(body[start + 1:start + 1 + count])
    return succeeded, message


class LircTransport:
    """
    Send IR keys through lircd's UNIX socket.

    A connection is opened per key, so a restarted lircd is picked up
    without restarting this process.
    """

    def __init__(self, socket_path: str = DEFAULT_LIRC_SOCKET,
                 remote: str = DEFAULT_LIRC_REMOTE, timeout: float = 5.0):
        self.socket_path = socket_path
        self.remote = remote
        self.timeout = timeout

    def send(self, code: str) -> None:
        command = f"SEND_ONCE {self.remote} {code}"
        try:
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
                sock.settimeout(self.timeout)
                sock.connect(self.socket_path)
                sock.sendall(f"{command}\n".encode("utf-8"))
                with sock.makefile("r", encoding="utf-8", newline="\n") as reader:
                    succeeded, message = read_lircd_reply(reader, command)
        except OSError as exc:
            raise TransportFailure(f"lircd unreachable at {self.socket_path}: {exc}") from exc

        if not succeeded:
            raise TransportFailure(message or f"lircd rejected '{code}'")

    def __repr__(self) -> str:
        return f"LircTransport(socket={self.socket_path!r}, remote={self.remote!r})"


class LoggingTransport:
    """Dry-run sender: logs every key and keeps the sequence in `sent`."""

    def __init__(self, remote: str = DEFAULT_LIRC_REMOTE):
        self.remote = remote
        self.sent: list[str] = []

    def send(self, code: str) -> None:
        logger.info("[dry-run] %s %s", self.remote, code)
        self.sent.append(code)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def pad_line(text: str, columns: int) -> str:
    """Pad or truncate text to exactly `columns` characters."""
    return text[:columns].ljust(columns)


class CharacterDisplay:
    """Two-line writer on top of an Adafruit Character_LCD object."""

    def __init__(self, lcd, columns: int = DEFAULT_LCD_COLUMNS):
        self._lcd = lcd
        self.columns = columns

    def write_lines(self, line1: str, line2: str) -> None:
        try:
            self._lcd.cursor_position(0, 0)
            self._lcd.message = f"{line1}\n{line2}"
        except (OSError, RuntimeError) as exc:
            raise TransportFailure(f"display write failed: {exc}") from exc


def build_character_lcd(pins=DEFAULT_LCD_PINS, columns: int = DEFAULT_LCD_COLUMNS,
                        lines: int = 2):
    """
    Create a Character_LCD_Mono wired to the given BCM pins.

    Requires the `lcd` extra (adafruit-circuitpython-charlcd) and a board
    supported by Adafruit Blinka.

    Args:
        pins: RS, EN, D4, D5, D6, D7 as BCM GPIO numbers
    """
    import board
    import digitalio
    from adafruit_character_lcd.character_lcd import Character_LCD_Mono

    if len(pins) != 6:
        raise ValueError(f"expected 6 LCD pins (RS, EN, D4-D7), got {len(pins)}")

    rs, en, d4, d5, d6, d7 = (digitalio.DigitalInOut(getattr(board, f"D{pin}")) for pin in pins)
    return Character_LCD_Mono(rs, en, d4, d5, d6, d7, columns, lines)
