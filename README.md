# finderbot

Access EV3 sensors and tacho motors through the device directories that the
ev3dev kernel exposes under `/sys/class`. Every device is a directory of
small text files, so the package works on any directory laid out the same
way, including a fake tree built in a test. It has no dependencies beyond the
standard library.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `finderbot.port` – `Port`, the common part of every device directory,
  together with `DeviceType`, `PortError` and `address_path_for(path)`.
- `finderbot.sensor_port` – `SensorPort`, a `Port` for a sensor directory.
- `finderbot.motor_base` – `MotorDevice`, a `Port` for a tacho-motor directory.
- `finderbot.motor_types` – the enums `MotorCommand`, `MotorStopAction`,
  `MotorPolarity` and `MotorState`, and `parse_states(text)`.

Failures raise `finderbot.port.PortError`.

## Layout expected on disk

```
<sensor dir>/{address,command,commands,mode,modes,num_values,poll_ms,value0..value9}
<motor dir>/{address,command,commands,speed,speed_sp,position,position_sp,
             duty_cycle_sp,state,polarity,stop_action,count_per_rot,max_speed}
```

The `command` and `mode` files are opened for appending, so they are created
if they are missing; every other file must already exist.

## Usage

### Ports

```python
from finderbot.port import Port, DeviceType, address_path_for

port = Port("/sys/class/tacho-motor/motor0")
if port.is_enabled():
    print(port.read_address())      # e.g. "ev3-ports:outA"
    print(port.read_commands())     # list of words in the commands file
    port.send_command("stop")
    print(port.device_type())       # DeviceType.MOTOR, from "motor" in the path

print(address_path_for("/sys/class/lego-sensor/sensor0"))
```

A `Port` whose `address`, `command` or `commands` file cannot be reached is
created disabled instead of raising: `is_enabled()` is false,
`device_type()` returns `DeviceType.DISABLED`, and the path and read/write
methods raise `PortError`. `device_type()` of an enabled port returns
`SENSOR` or `MOTOR` when the path contains "sensor" or "motor", otherwise
`UNKNOWN`. `Port.from_port(other)` makes a new port on the directory of an
enabled one and raises `PortError` if that fails. `override_enabled()` forces
the enabled flag and is meant for tests.

### Sensors

```python
from finderbot.sensor_port import SensorPort

gyro = SensorPort("/sys/class/lego-sensor/sensor0")
gyro.set_mode("GYRO-ANG")
print(gyro.get_modes())       # words in the modes file
print(gyro.get_num_values())  # integer in num_values
print(gyro.get_poll_ms())     # integer in poll_ms
print(gyro.get_value(0))      # integer in value0
```

`get_value(index)` accepts indexes 0 to 9, raises `PortError` outside that
range, and reads an empty value file as 0. On a disabled sensor
`get_modes()` returns an empty list and `get_poll_ms()` returns -1; the
other readers raise `PortError`. `SensorPort("")` raises `PortError`.
`device_type()` returns `DeviceType.SENSOR`, and raises `PortError` if the
directory path does not contain "sensor".

### Motors

```python
from finderbot.motor_base import MotorDevice
from finderbot.motor_types import MotorCommand, parse_states
from pathlib import Path

motor = MotorDevice("/sys/class/tacho-motor/motor0")
print(motor.get_position())                 # integer in position, empty reads as 0
print(motor.speed_sp_path())                # ".../speed_sp"
motor.send_command(MotorCommand.RUN_FOREVER.value)
print(parse_states(Path(motor.state_path()).read_text()))
```

Unlike a plain port, `MotorDevice` raises `PortError` when any of its files
is missing. It offers the path of each file (`speed_path`, `speed_sp_path`,
`position_path`, `position_sp_path`, `duty_cycle_path`, `state_path`,
`polarity_path`, `stop_action_path`, `count_per_rotation_path`,
`max_speed_path`), `get_position()` and `reinit()`.

`parse_states(text)` turns the space-separated contents of a state file into
a list of `MotorState`, logging and skipping unknown words. The string values
of `MotorCommand`, `MotorStopAction` and `MotorPolarity` are the words the
device files accept, e.g. `"run-to-abs-pos"`, `"hold"`, `"inversed"`.

## What this package does not do

- It does not scan a device tree and match directories to ports
  `in1`–`in4` and `outA`–`outD`; you pass each device directory yourself.
- `MotorDevice` gives file paths and the position only. It has no methods to
  set speed, duty cycle, polarity or stop action, to move to a position or
  wait for a motor to stop; write those files yourself or use `send_command`.
- There is no drive, turn, gearbox or tool logic, no background polling of
  sensors with event callbacks, and no command-line program.