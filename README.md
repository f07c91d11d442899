# ecusim

A small simulator of an engine control unit. It keeps a set of sensors and
actuators, nudges every sensor reading by a small random amount on each
simulation step, drives the actuators from the readings, judges whether the
engine is running within limits, and keeps a timestamped log of each step.

## Sensors and actuators

The control unit starts with these sensors, in this order:

| Id | Name          | Unit   | Initial value |
|----|---------------|--------|---------------|
| 0  | Road Speed    | km/h   | 0.0           |
| 1  | AFR           | ratio  | 14.7          |
| 2  | Wideband O2   | lambda | 1.0           |
| 3  | MAP/Boost     | bar    | 1.0           |
| 4  | Fuel Pressure | bar    | 3.0           |

On each step every sensor changes by a value between -0.050 and +0.049.

It also has three actuators, all off at the start. After each step:

- **NO2 Solenoid** is on when boost is above 1.5 bar
- **Fuel Injectors** is on when the air/fuel ratio is below 14.0
- **Boost Controller** is on when boost is below 1.8 bar

The engine status is `OK` when boost is below 2.0 bar and the air/fuel ratio
is strictly between 10.0 and 16.0, and `WARNING` otherwise.

## Installation

```
pip install .
```

## Running the dashboard

```
ecusim
```

This prints a text dashboard: status bars for boost pressure, air/fuel ratio
and fuel pressure, the overall system status, and panels for sensors,
actuators, engine status and logs. It then prompts for a command:

- Enter, `s`, `sim` or `run` runs one simulation step and prints the dashboard
  again
- `q`, `quit` or `exit` (or end of input) quits

Options:

- `--steps N` runs N simulation steps, prints the dashboard once and exits
  without prompting
- `--interval SECONDS` waits this long between steps when `--steps` is given
- `--seed N` seeds the random number generator so a run can be repeated

A negative `--steps` or `--interval` is rejected with exit status 2.

```
ecusim --steps 10 --seed 1
```

## Using it as a library

```python
import random

from ecusim.ecu import ECU
from ecusim.dashboard import Dashboard

ecu = ECU(random.Random(42))
ecu.simulate_step()

print(ecu.sensor_value(3))      # current boost in bar
print(ecu.sensors_info())
print(ecu.actuators_info())
print(ecu.engine_status_info())
print(ecu.logs_info())

dashboard = Dashboard(ecu)
dashboard.simulate_step()
indicators = dashboard.status_indicators()
print(indicators.status_text, indicators.boost_bar)
print(dashboard.render())
```

If you pass your own `random.Random` to `ECU`, the simulation becomes
reproducible. `ECU.sensor_value` returns `0.0` for a sensor id that does not
exist. `ECU` also has `show_sensors`, `show_actuators`, `show_engine_status`,
`show_last_log` and `show_all_logs`, which print to standard output.

`Dashboard` offers `sensor_lines`, `actuator_lines`, `engine_lines` and
`log_lines`, each returning the trimmed lines of its panel, and
`status_indicators`, which returns a `StatusIndicators` with the readings,
the bar values (boost and fuel pressure in mbar, AFR times 100, each held
inside its bar's range), the status and its colour.

The separate parts live in `ecusim.components`: `Sensor`, `Actuator`,
`Engine`, `Logger` and `Differential`. An `ECU` holds a `Differential`
(ratio 3.73, status `WARNING` at 200 km/h and above), but `simulate_step`
does not update it.

## What it does not do

The dashboard is plain text printed to the terminal. There is no graphical
window and it does not refresh on its own; it is redrawn only after a
simulation step. Logs are kept in memory only and are lost when the program
exits.

## Tests

```
pip install .[test]
pytest
```