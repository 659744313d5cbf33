"""Base access to a device directory exposed through the sysfs-style class tree."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)


class DeviceType(Enum):
    """Kind of device a port directory belongs to."""

    SENSOR = 0
    MOTOR = 1
    UNKNOWN = 2
    DISABLED = 3
    ANY = 4


class PortError(Exception):
    """Raised when a port cannot be used or its files cannot be reached."""


def address_path_for(path: str) -> str:
    """Return the address file path for a port directory."""
    if not path:
        raise PortError("Port path is empty")
    return f"{path}/address"


class Port:
    """A device directory holding ``address``, ``command`` and ``commands`` files.

    A port whose files cannot be found is left disabled rather than raising.
    """

    def __init__(self, path: str) -> None:
        self._path = ""
        self._enabled = False
        try:
            self.set_base_path(path)
        except PortError as exc:
            log.error("Failed to set path for port %r: %s", path, exc)

    @classmethod
    def from_port(cls, port: Port) -> Port:
        """Create a new port on the same directory as an existing, enabled one."""
        try:
            path = port.base_path()
        except PortError as exc:
            raise PortError("Invalid port path") from exc
        new_port = cls(path)
        if not new_port.is_enabled():
            raise PortError(f"Failed to set path for port: {path}")
        return new_port

    def set_base_path(self, path: str) -> None:
        """Point the port at a directory and check its files."""
        if not path:
            raise PortError("Port path is empty")
        self._path = path
        try:
            self._init_files()
        except PortError as exc:
            self._enabled = False
            self._path = ""
            raise PortError(f"Failed to initialize files for port: {path}") from exc
        self._enabled = True

    def reinit(self) -> None:
        """Check the port's files again."""
        self._init_files()

    def _init_files(self) -> None:
        address = Path(self._path, "address")
        command = Path(self._path, "command")
        commands = Path(self._path, "commands")

        if not address.is_file():
            raise PortError(f"File does not exist: {address}")
        try:
            with command.open("a"):
                pass
        except OSError as exc:
            raise PortError(f"Failed to open command file: {command}") from exc
        if not commands.is_file():
            raise PortError(f"File does not exist: {commands}")
        log.info("All files opened successfully for %s", self._path)

    def _require_enabled(self, what: str) -> None:
        if not self._enabled:
            raise PortError(f"{what}, port is not enabled: {self._path}")

    def port_key(self) -> str:
        """Return the last character of the port directory name."""
        self._require_enabled("Failed to get port key")
        return self._path[-1]

    def base_path(self) -> str:
        """Return the port directory."""
        self._require_enabled("Failed to get base path")
        return self._path

    def address_path(self) -> str:
        """Return the path of the address file."""
        self._require_enabled("Failed to get address")
        return f"{self._path}/address"

    def command_path(self) -> str:
        """Return the path of the command file."""
        self._require_enabled("Failed to get command path")
        return f"{self._path}/command"

    def commands_path(self) -> str:
        """Return the path of the file listing supported commands."""
        self._require_enabled("Failed to get commands path")
        return f"{self._path}/commands"

    def read_address(self) -> str:
        """Read the physical address the device is connected to."""
        self._require_enabled("Failed to get address")
        tokens = Path(self.address_path()).read_text().split()
        return tokens[0] if tokens else ""

    def send_command(self, command: str) -> None:
        """Write a command to the command file."""
        self._require_enabled("Failed to set command")
        Path(self.command_path()).write_text(command)
        log.debug("Command set: %s", command)

    def read_commands(self) -> list[str]:
        """Return the commands the device accepts."""
        self._require_enabled("Failed to get commands")
        return Path(self.commands_path()).read_text().split()

    def device_type(self) -> DeviceType:
        """Infer the device type from the port directory path."""
        if not self._enabled:
            return DeviceType.DISABLED
        if "sensor" in self._path:
            return DeviceType.SENSOR
        if "motor" in self._path:
            return DeviceType.MOTOR
        return DeviceType.UNKNOWN

    def is_enabled(self) -> bool:
        """Return whether the port is usable."""
        return self._enabled

    def override_enabled(self, enabled: bool) -> None:
        """Force the enabled state; intended for testing."""
        self._enabled = enabled