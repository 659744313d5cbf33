"""Access to a tacho motor directory: file paths, file checks and position."""

from __future__ import annotations

import logging
from pathlib import Path

from finderbot.port import Port, PortError

log = logging.getLogger(__name__)

_WRITABLE_FILES = (
    "speed_sp",
    "position_sp",
    "duty_cycle_sp",
    "polarity",
    "stop_action",
)
_READABLE_FILES = (
    "speed",
    "position",
    "state",
    "count_per_rot",
    "max_speed",
)


def _read_int(path: str, default: int | None = None) -> int:
    try:
        tokens = Path(path).read_text().split()
    except OSError as exc:
        raise PortError(f"Failed to read {path}") from exc
    if tokens:
        try:
            return int(tokens[0])
        except ValueError:
            pass
    if default is None:
        raise PortError(f"Failed to read an integer from {path}")
    return default


class MotorDevice(Port):
    """A tacho motor directory with speed, position, duty cycle, state,
    polarity, stop action, count per rotation and max speed files.

    Unlike a plain port, a motor whose files cannot be found raises on creation.
    """

    def __init__(self, path: str) -> None:
        self._position = 0
        super().__init__(path)
        try:
            self._init_motor_files()
        except PortError as exc:
            log.error("MotorPort failed to initialize: %s", exc)
            raise PortError("MotorPort failed to initialize") from exc

    @classmethod
    def from_port(cls, port: Port) -> MotorDevice:
        """Create a motor on the same directory as an existing, enabled port."""
        try:
            path = port.base_path()
        except PortError as exc:
            raise PortError("Invalid port path") from exc
        return cls(path)

    def reinit(self) -> None:
        """Check the port's and the motor's files again."""
        super().reinit()
        self._init_motor_files()

    def _init_motor_files(self) -> None:
        if not self.is_enabled():
            raise PortError("MotorPort failed to initialize, port is not enabled")

        base = Path(self.base_path())
        if not base.exists():
            raise PortError("MotorPort failed to initialize, base path does not exist")

        readable = {
            "address": self.address_path(),
            "speed": self.speed_path(),
            "position": self.position_path(),
            "state": self.state_path(),
            "count_per_rotation": self.count_per_rotation_path(),
            "max_speed": self.max_speed_path(),
        }
        writable = {
            "command": self.command_path(),
            "speed_sp": self.speed_sp_path(),
            "position_sp": self.position_sp_path(),
            "duty_cycle": self.duty_cycle_path(),
            "polarity": self.polarity_path(),
            "stop_action": self.stop_action_path(),
        }

        for name, path in {**readable, **writable}.items():
            if not Path(path).exists():
                raise PortError(
                    f"MotorPort failed to initialize, {name} path does not exist"
                )

        for name, path in writable.items():
            try:
                with open(path, "a"):
                    pass
            except OSError as exc:
                raise PortError(
                    f"MotorPort failed to initialize, {name} file is not open"
                ) from exc

        for name, path in readable.items():
            try:
                with open(path):
                    pass
            except OSError as exc:
                raise PortError(
                    f"MotorPort failed to initialize, {name} file is not open"
                ) from exc

        log.debug("MotorPort files opened for %s", self._path)
        self._position = self.get_position()

    def _file_path(self, name: str) -> str:
        self._require_enabled(f"Failed to get {name} path")
        return f"{self.base_path()}/{name}"

    def speed_path(self) -> str:
        """Return the path of the file holding the current speed."""
        return self._file_path("speed")

    def speed_sp_path(self) -> str:
        """Return the path of the file setting the target speed."""
        return self._file_path("speed_sp")

    def position_path(self) -> str:
        """Return the path of the file holding the current position."""
        return self._file_path("position")

    def position_sp_path(self) -> str:
        """Return the path of the file setting the target position."""
        return self._file_path("position_sp")

    def duty_cycle_path(self) -> str:
        """Return the path of the file setting the duty cycle for run-direct."""
        return self._file_path("duty_cycle_sp")

    def state_path(self) -> str:
        """Return the path of the file listing the motor's states."""
        return self._file_path("state")

    def polarity_path(self) -> str:
        """Return the path of the polarity file."""
        return self._file_path("polarity")

    def stop_action_path(self) -> str:
        """Return the path of the stop action file."""
        return self._file_path("stop_action")

    def count_per_rotation_path(self) -> str:
        """Return the path of the file holding encoder counts per rotation."""
        return self._file_path("count_per_rot")

    def max_speed_path(self) -> str:
        """Return the path of the file holding the maximum speed."""
        return self._file_path("max_speed")

    def get_position(self) -> int:
        """Read the current position in tacho counts; an empty file reads as 0."""
        self._require_enabled("MotorPort failed to get position")
        position = _read_int(self.position_path(), default=0)
        log.debug("POSITION.GET: WITH_RESULT: %d", position)
        return position