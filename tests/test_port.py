from pathlib import Path

import pytest

from finderbot.port import DeviceType, Port, PortError, address_path_for


def make_port_dir(base: Path, name: str, address: str = "ev3-ports:in1") -> Path:
    port_dir = base / name
    port_dir.mkdir(parents=True)
    (port_dir / "address").write_text(address + "\n")
    (port_dir / "command").write_text("")
    (port_dir / "commands").write_text("run-forever stop reset\n")
    return port_dir


def test_address_path_for_appends_address():
    assert address_path_for("/some/dir") == "/some/dir/address"


def test_address_path_for_empty_raises():
    with pytest.raises(PortError):
        address_path_for("")


def test_valid_port_is_enabled_with_paths(tmp_path):
    port_dir = make_port_dir(tmp_path, "lego-sensor/sensor0")
    port = Port(str(port_dir))
    assert port.is_enabled() is True
    assert port.base_path() == str(port_dir)
    assert port.address_path() == f"{port_dir}/address"
    assert port.command_path() == f"{port_dir}/command"
    assert port.commands_path() == f"{port_dir}/commands"


def test_missing_files_leave_port_disabled(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    port = Port(str(empty))
    assert port.is_enabled() is False
    assert port.device_type() is DeviceType.DISABLED
    with pytest.raises(PortError):
        port.base_path()


def test_empty_path_leaves_port_disabled():
    port = Port("")
    assert port.is_enabled() is False
    with pytest.raises(PortError):
        port.port_key()


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("lego-sensor/sensor0", DeviceType.SENSOR),
        ("tacho-motor/motor0", DeviceType.MOTOR),
        ("other/device0", DeviceType.UNKNOWN),
    ],
)
def test_device_type_from_path(tmp_path, name, expected):
    port = Port(str(make_port_dir(tmp_path, name)))
    assert port.device_type() is expected


def test_read_address(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "p", address="ev3-ports:outA")))
    assert port.read_address() == "ev3-ports:outA"


def test_send_command_writes_file(tmp_path):
    port_dir = make_port_dir(tmp_path, "p")
    port = Port(str(port_dir))
    port.send_command("run-forever")
    assert (port_dir / "command").read_text() == "run-forever"


def test_read_commands_lists_all(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "p")))
    assert port.read_commands() == ["run-forever", "stop", "reset"]


def test_port_key_is_last_character(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "sensor7")))
    assert port.port_key() == "7"


def test_override_enabled_disables_access(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "p")))
    port.override_enabled(False)
    with pytest.raises(PortError):
        port.command_path()
    with pytest.raises(PortError):
        port.send_command("stop")


def test_from_port_shares_directory(tmp_path):
    port_dir = make_port_dir(tmp_path, "p")
    original = Port(str(port_dir))
    copy = Port.from_port(original)
    assert copy is not original
    assert copy.base_path() == original.base_path()


def test_from_disabled_port_raises(tmp_path):
    original = Port(str(tmp_path / "missing"))
    with pytest.raises(PortError):
        Port.from_port(original)


def test_set_base_path_empty_raises(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "p")))
    with pytest.raises(PortError):
        port.set_base_path("")


def test_set_base_path_to_invalid_dir_disables(tmp_path):
    port = Port(str(make_port_dir(tmp_path, "p")))
    with pytest.raises(PortError):
        port.set_base_path(str(tmp_path / "nowhere"))
    assert port.is_enabled() is False


def test_reinit_fails_when_file_removed(tmp_path):
    port_dir = make_port_dir(tmp_path, "p")
    port = Port(str(port_dir))
    (port_dir / "commands").unlink()
    with pytest.raises(PortError):
        port.reinit()