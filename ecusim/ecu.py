"""The engine control unit: sensors, actuators and the control loop."""

from __future__ import annotations

import random
from typing import Optional

from ecusim.components import (
    AFR_INDEX,
    BOOST_INDEX,
    Actuator,
    Differential,
    Engine,
    Logger,
    Sensor,
    _evaluate_status,
)

NO2_SOLENOID = 0
FUEL_INJECTORS = 1
BOOST_CONTROLLER = 2


class ECU:
    """Simulated engine control unit."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.sensors = [
            Sensor("Road Speed", "km/h", 0.0),
            Sensor("AFR", "ratio", 14.7),
            Sensor("Wideband O2", "lambda", 1.0),
            Sensor("MAP/Boost", "bar", 1.0),
            Sensor("Fuel Pressure", "bar", 3.0),
        ]
        self.actuators = [
            Actuator("NO2 Solenoid", False),
            Actuator("Fuel Injectors", False),
            Actuator("Boost Controller", False),
        ]
        self.engine = Engine()
        self.logger = Logger()
        self.differential = Differential()

    def simulate_step(self) -> None:
        """Perturb every sensor, run the control logic and log the step."""
        for sensor in self.sensors:
            sensor.value += (self._rng.randrange(100) - 50) / 1000.0

        boost = self.sensors[BOOST_INDEX].value
        afr = self.sensors[AFR_INDEX].value

        self.actuators[NO2_SOLENOID].state = boost > 1.5
        self.actuators[FUEL_INJECTORS].state = afr < 14.0
        self.actuators[BOOST_CONTROLLER].state = boost < 1.8

        self.engine.update(self.sensors, self.actuators)

        self.logger.log(
            "Simulation step completed:\n"
            f"Boost: {boost:.2f} bar\n"
            f"AFR: {afr:.2f}\n"
        )

    def show_last_log(self) -> None:
        self.logger.show_last_log()

    def show_sensors(self) -> None:
        lines = "".join(
            f"{s.name}: {s.value:g} {s.unit}\n" for s in self.sensors
        )
        print(f"\n=== Sensor Readings ===\n{lines}", end="")

    def show_actuators(self) -> None:
        lines = "".join(
            f"{a.name}: {'ON' if a.state else 'OFF'}\n" for a in self.actuators
        )
        print(f"\n=== Actuator States ===\n{lines}", end="")

    def show_engine_status(self) -> None:
        self.engine.show_status()

    def show_all_logs(self) -> None:
        self.logger.show_all_logs()

    def sensor_value(self, sensor_id: int) -> float:
        """Return the value of a sensor by index, or 0.0 if there is none."""
        if 0 <= sensor_id < len(self.sensors):
            return self.sensors[sensor_id].value
        return 0.0

    def sensors_info(self) -> str:
        lines = "".join(
            f"{s.name}: {s.value:f} {s.unit}\n" for s in self.sensors
        )
        return f"\n=== Sensor Readings ===\n{lines}"

    def actuators_info(self) -> str:
        lines = "".join(
            f"{a.name}: {'ON' if a.state else 'OFF'}\n" for a in self.actuators
        )
        return f"\n=== Actuator States ===\n{lines}"

    def engine_status_info(self) -> str:
        status = _evaluate_status(
            self.sensors[BOOST_INDEX].value, self.sensors[AFR_INDEX].value
        )
        return f"\n=== Engine Status ===\nStatus: {status}\n"

    def logs_info(self) -> str:
        return f"\n=== Logs ===\n{self.logger.all_text()}"