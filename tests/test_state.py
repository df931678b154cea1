"""Unit tests for the State value type."""

import pytest

from apps.thermostat.exceptions import InvalidEnum, InvalidState
from apps.thermostat.state import (
    FAN_SPEED_TOKENS,
    MODE_TOKENS,
    FanSpeed,
    Mode,
    State,
)


def test_defaults() -> None:
    state = State()

    assert state.powered_on is False
    assert state.current_mode is Mode.COOL
    assert state.fan_speed is FanSpeed.AUTO
    assert state.target_temperature == 72
    assert state.current_temperature == 0
    assert state.is_valid()


def test_token_tables_cover_every_member() -> None:
    assert set(MODE_TOKENS) == set(Mode)
    assert set(FAN_SPEED_TOKENS) == set(FanSpeed)
    assert MODE_TOKENS[Mode.HEAT] == "heat"
    assert FAN_SPEED_TOKENS[FanSpeed.AUTO] == "auto"


def test_token_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        MODE_TOKENS[Mode.HEAT] = "warm"


@pytest.mark.parametrize("temp", [60, 62, 74, 76])
def test_heat_accepts_its_range(temp: int) -> None:
    assert State(current_mode=Mode.HEAT, target_temperature=temp).is_valid()


@pytest.mark.parametrize("temp", [58, 78, 80, 88, 61, 75])
def test_heat_rejects_outside_range_or_odd(temp: int) -> None:
    assert not State(current_mode=Mode.HEAT, target_temperature=temp).is_valid()


@pytest.mark.parametrize("mode", [Mode.COOL, Mode.DRY, Mode.FAN])
def test_other_modes_accept_boundaries(mode: Mode) -> None:
    assert State(current_mode=mode, target_temperature=64).is_valid()
    assert State(current_mode=mode, target_temperature=88).is_valid()


@pytest.mark.parametrize("temp", [60, 62, 90, 65, 87, 73])
def test_other_modes_reject_outside_range_or_odd(temp: int) -> None:
    assert not State(current_mode=Mode.COOL, target_temperature=temp).is_valid()


def test_validity_ignores_power_and_current_temperature() -> None:
    assert State(powered_on=True, current_temperature=-40).is_valid()
    assert State(powered_on=False, current_temperature=999).is_valid()


def test_unknown_enum_values_are_invalid() -> None:
    assert not State(current_mode="WARM").is_valid()
    assert not State(fan_speed="TURBO").is_valid()


def test_non_integer_temperature_is_invalid() -> None:
    assert not State(target_temperature=72.0).is_valid()
    assert not State(target_temperature="72").is_valid()


@pytest.mark.parametrize("mode", list(Mode))
def test_powered_off_always_sends_turn_off(mode: Mode) -> None:
    temp = 70 if mode is Mode.HEAT else 80
    state = State(current_mode=mode, fan_speed=FanSpeed.HIGH, target_temperature=temp)

    assert state.to_command() == "turn-off"
    assert state.to_power_on_command() == "turn-off"


def test_to_command_examples() -> None:
    assert State(powered_on=True).to_command() == "cool-auto-72F"
    assert State(
        powered_on=True, current_mode=Mode.HEAT, fan_speed=FanSpeed.QUIET, target_temperature=60
    ).to_command() == "heat-quiet-60F"
    assert State(
        powered_on=True, current_mode=Mode.DRY, fan_speed=FanSpeed.MEDIUM, target_temperature=88
    ).to_command() == "dry-medium-88F"


def test_fan_mode_never_carries_a_temperature() -> None:
    for temp in (64, 76, 88):
        state = State(powered_on=True, current_mode=Mode.FAN, fan_speed=FanSpeed.LOW,
                      target_temperature=temp)
        assert state.to_command() == "fan-low"


@pytest.mark.parametrize("mode", list(Mode))
def test_command_tokens_map_back_to_the_state(mode: Mode) -> None:
    mode_by_token = {token: member for member, token in MODE_TOKENS.items()}
    speed_by_token = {token: member for member, token in FAN_SPEED_TOKENS.items()}
    temps = range(60, 77, 2) if mode is Mode.HEAT else range(64, 89, 2)

    for speed in FanSpeed:
        for temp in temps:
            state = State(powered_on=True, current_mode=mode, fan_speed=speed,
                          target_temperature=temp)
            parts = state.to_command().split("-")

            assert mode_by_token[parts[0]] is mode
            assert speed_by_token[parts[1]] is speed
            if mode is Mode.FAN:
                assert len(parts) == 2
            else:
                assert parts[2] == f"{temp}F"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(Mode.COOL, "cool-on"), (Mode.DRY, "dry-on"), (Mode.HEAT, "heat-on"), (Mode.FAN, "fan-on")],
)
def test_power_on_command(mode: Mode, expected: str) -> None:
    temp = 70 if mode is Mode.HEAT else 72
    state = State(powered_on=True, current_mode=mode, target_temperature=temp)

    assert state.to_power_on_command() == expected


def test_commands_refuse_invalid_state() -> None:
    state = State(powered_on=True, target_temperature=71)

    with pytest.raises(InvalidState):
        state.to_command()
    with pytest.raises(InvalidState):
        state.to_power_on_command()


def test_setter_commits_valid_change() -> None:
    state = State()

    state.set_power(True)
    state.set_mode(Mode.DRY)
    state.set_fan_speed(FanSpeed.HIGH)
    state.set_target_temperature(80)

    assert state == State(powered_on=True, current_mode=Mode.DRY, fan_speed=FanSpeed.HIGH,
                          target_temperature=80)


def test_setter_leaves_state_untouched_on_invalid_change() -> None:
    state = State(current_mode=Mode.COOL, target_temperature=80)
    before = state.copy()

    with pytest.raises(InvalidState):
        state.set_mode(Mode.HEAT)  # 80 is above the heat ceiling
    with pytest.raises(InvalidState):
        state.set_target_temperature(81)
    with pytest.raises(InvalidState):
        state.set_fan_speed("TURBO")

    assert state == before


def test_copy_is_independent() -> None:
    state = State()
    snapshot = state.copy()

    state.set_target_temperature(70)

    assert snapshot.target_temperature == 72


def test_to_dict() -> None:
    state = State(powered_on=True, current_mode=Mode.FAN, fan_speed=FanSpeed.LOW)

    assert state.to_dict() == {
        "powered_on": True,
        "current_mode": "FAN",
        "fan_speed": "LOW",
        "target_temperature": 72,
        "current_temperature": 0,
    }


def test_parse_wire_tokens() -> None:
    assert Mode.parse("HEAT") is Mode.HEAT
    assert FanSpeed.parse("QUIET") is FanSpeed.QUIET


@pytest.mark.parametrize("token", ["heat", "WARM", "", None])
def test_parse_rejects_unknown_mode(token) -> None:
    with pytest.raises(InvalidEnum, match="invalid mode"):
        Mode.parse(token)


def test_parse_rejects_unknown_fan_speed() -> None:
    with pytest.raises(InvalidEnum, match="invalid fan speed"):
        FanSpeed.parse("TURBO")
