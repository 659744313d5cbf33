"""Commands, stop actions, polarities and states of a tacho motor."""

from __future__ import annotations

import logging
from enum import Enum

log = logging.getLogger(__name__)


class MotorCommand(str, Enum):
    """Command written to a motor's command file."""

    STOP = "stop"
    RESET = "reset"
    RUN_FOREVER = "run-forever"
    RUN_TO_ABS_POS = "run-to-abs-pos"
    RUN_TO_REL_POS = "run-to-rel-pos"
    RUN_TIMED = "run-timed"
    RUN_DIRECT = "run-direct"


class MotorStopAction(str, Enum):
    """How a motor stops after completing a command."""

    COAST = "coast"
    BRAKE = "brake"
    HOLD = "hold"


class MotorPolarity(str, Enum):
    """Direction in which a motor turns for positive values."""

    NORMAL = "normal"
    INVERSED = "inversed"


class MotorState(str, Enum):
    """A state flag reported by a motor."""

    STOPPED = "stopped"
    RUNNING = "running"
    RAMPING = "ramping"
    OVERLOADED = "overloaded"
    STALLED = "stalled"
    HOLDING = "holding"


def parse_states(text: str) -> list[MotorState]:
    """Parse the space separated contents of a motor's state file.

    Unknown tokens are logged and skipped.
    """
    states = []
    for token in text.split():
        try:
            states.append(MotorState(token))
        except ValueError:
            log.error("Unknown motor state: %s", token)
    return states