import pytest

from finderbot.motor_types import (
    MotorCommand,
    MotorPolarity,
    MotorState,
    MotorStopAction,
    parse_states,
)


def test_parse_states_multiple_tokens():
    assert parse_states("running stalled") == [MotorState.RUNNING, MotorState.STALLED]


def test_parse_states_skips_unknown_tokens():
    assert parse_states("holding bogus overloaded\n") == [
        MotorState.HOLDING,
        MotorState.OVERLOADED,
    ]


def test_parse_states_empty():
    assert parse_states("  \n") == []


@pytest.mark.parametrize("state", list(MotorState))
def test_parse_states_round_trip(state):
    assert parse_states(state.value) == [state]


@pytest.mark.parametrize(
    ("command", "text"),
    [
        (MotorCommand.STOP, "stop"),
        (MotorCommand.RUN_DIRECT, "run-direct"),
        (MotorCommand.RUN_TO_ABS_POS, "run-to-abs-pos"),
        (MotorCommand.RUN_TO_REL_POS, "run-to-rel-pos"),
    ],
)
def test_command_text(command, text):
    assert command.value == text
    assert MotorCommand(text) is command


def test_stop_action_and_polarity_text():
    assert MotorStopAction.HOLD.value == "hold"
    assert MotorPolarity("inversed") is MotorPolarity.INVERSED


def test_unknown_command_raises():
    with pytest.raises(ValueError):
        MotorCommand("spin")