"""Access to a sensor directory: values, modes, value count and poll interval."""

from __future__ import annotations

import logging
from pathlib import Path

from finderbot.port import DeviceType, Port, PortError

log = logging.getLogger(__name__)

VALUE_FILE_COUNT = 10


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise PortError(f"Failed to read {path}") from exc


def _read_int(path: str, default: int | None = None) -> int:
    tokens = _read_text(path).split()
    if tokens:
        try:
            return int(tokens[0])
        except ValueError:
            pass
    if default is None:
        raise PortError(f"Failed to read an integer from {path}")
    return default


class SensorPort(Port):
    """A sensor directory with ``value0``..``value9``, ``mode``, ``modes``,
    ``num_values`` and ``poll_ms`` files next to the common port files.

    A sensor whose files cannot be found is left disabled rather than raising.
    """

    def __init__(self, path: str) -> None:
        if not path:
            raise PortError("SensorPort created without port path")
        self._value_paths: list[str] = []
        super().__init__(path)

    @classmethod
    def from_port(cls, port: Port) -> SensorPort:
        """Create a sensor port on the same directory as an existing, enabled port."""
        try:
            path = port.base_path()
        except PortError as exc:
            raise PortError("Unable to get path from port") from exc
        sensor = cls(path)
        if not sensor.is_enabled():
            raise PortError(f"Failed to set path for port: {path}")
        return sensor

    def set_base_path(self, path: str) -> None:
        """Point the sensor at a directory and check all of its files."""
        try:
            super().set_base_path(path)
        except PortError as exc:
            raise PortError(f"Failed to set path for port: {path}") from exc
        try:
            self._init_sensor_files()
        except PortError:
            self._enabled = False
            self._path = ""
            self._value_paths = []
            raise

    def reinit(self) -> None:
        """Check the port's and the sensor's files again."""
        self._value_paths = []
        super().reinit()
        self._init_sensor_files()

    def _init_sensor_files(self) -> None:
        value_paths = [self.value_path(index) for index in range(VALUE_FILE_COUNT)]
        for value in value_paths:
            if not Path(value).is_file():
                raise PortError(f"File does not exist: {value}")

        mode = self.mode_path()
        try:
            with open(mode, "a"):
                pass
        except OSError as exc:
            raise PortError(f"File does not exist: {mode}") from exc

        for required in (self.modes_path(), self.num_values_path(), self.poll_ms_path()):
            if not Path(required).is_file():
                raise PortError(f"File does not exist: {required}")

        self._value_paths = value_paths
        log.debug("Sensor files opened for %s", self._path)

    def value_path(self, index: int) -> str:
        """Return the path of the ``value<index>`` file."""
        self._require_enabled("Failed to get value path")
        return f"{self.base_path()}/value{index}"

    def mode_path(self) -> str:
        """Return the path of the mode file."""
        self._require_enabled("Failed to get mode path")
        return f"{self.base_path()}/mode"

    def modes_path(self) -> str:
        """Return the path of the file listing available modes."""
        self._require_enabled("Failed to get modes path")
        return f"{self.base_path()}/modes"

    def num_values_path(self) -> str:
        """Return the path of the num_values file."""
        self._require_enabled("Failed to get num_values path")
        return f"{self.base_path()}/num_values"

    def poll_ms_path(self) -> str:
        """Return the path of the poll_ms file."""
        self._require_enabled("Failed to get poll_ms path")
        return f"{self.base_path()}/poll_ms"

    def get_value(self, index: int) -> int:
        """Read the integer in ``value<index>``; an empty file reads as 0."""
        self._require_enabled("Failed to get value")
        if not 0 <= index < len(self._value_paths):
            raise PortError(f"Index out of range: {index}")
        value = _read_int(self._value_paths[index], default=0)
        log.info("VALUE.GET: %s WITH VALUE: %d", self._path, value)
        return value

    def set_mode(self, mode: str) -> None:
        """Write a mode to the mode file."""
        self._require_enabled("Failed to set mode")
        try:
            Path(self.mode_path()).write_text(mode)
        except OSError as exc:
            raise PortError(f"Failed to write mode for {self._path}") from exc
        log.info("MODE.SET: %s WITH_VALUE: %s", self._path, mode)

    def get_modes(self) -> list[str]:
        """Return the available modes, or an empty list for a disabled sensor."""
        if not self.is_enabled():
            log.warning("Port is not enabled for %s", self._path)
            return []
        return _read_text(self.modes_path()).split()

    def get_num_values(self) -> int:
        """Return the number of values the current mode provides."""
        self._require_enabled("Failed to get num_values")
        return _read_int(self.num_values_path())

    def get_poll_ms(self) -> int:
        """Return the poll interval in milliseconds, or -1 for a disabled sensor."""
        if not self.is_enabled():
            log.warning("Port is not enabled for %s", self._path)
            return -1
        return _read_int(self.poll_ms_path())

    def device_type(self) -> DeviceType:
        """Return SENSOR, raising if the directory is not a sensor."""
        found = super().device_type()
        if found is not DeviceType.SENSOR:
            raise PortError("device_type() called on non-sensor port")
        return DeviceType.SENSOR