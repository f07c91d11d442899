"""Sensors, actuators and the engine-side units driven by the ECU."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

STATUS_OK = "OK"
STATUS_WARNING = "WARNING"

BOOST_INDEX = 3
AFR_INDEX = 1

BOOST_LIMIT = 2.0
AFR_MIN = 10.0
AFR_MAX = 16.0


def _evaluate_status(boost: float, afr: float) -> str:
    """Return the engine status for the given boost (bar) and air/fuel ratio."""
    boost_ok = boost < BOOST_LIMIT
    afr_ok = AFR_MIN < afr < AFR_MAX
    return STATUS_OK if boost_ok and afr_ok else STATUS_WARNING


@dataclass
class Sensor:
    """A named measurement with a unit and a current value."""

    name: str
    unit: str
    value: float

    def read_value(self) -> float:
        """Return the current reading."""
        return self.value


@dataclass
class Actuator:
    """A named on/off output."""

    name: str
    state: bool = False

    def activate(self) -> None:
        self.state = True

    def deactivate(self) -> None:
        self.state = False


@dataclass
class Engine:
    """Tracks overall engine health from boost and AFR readings."""

    status: str = STATUS_OK

    def update(self, sensors: Sequence[Sensor], actuators: Sequence[Actuator]) -> None:
        """Recompute the status from the boost and AFR sensors."""
        self.status = _evaluate_status(
            sensors[BOOST_INDEX].value, sensors[AFR_INDEX].value
        )

    def show_status(self) -> str:
        """Print the status line and return it."""
        line = f"Engine Status: {self.status}"
        print(line)
        return line


@dataclass
class Logger:
    """Keeps timestamped log entries in memory."""

    entries: list[str] = field(default_factory=list)

    def log(self, message: str) -> None:
        """Append a message prefixed with the current local time."""
        self.entries.append(f"{time.ctime()} - {message}")

    def last(self) -> Optional[str]:
        """Return the newest entry, or None when nothing has been logged."""
        return self.entries[-1] if self.entries else None

    def show_last_log(self) -> None:
        entry = self.last()
        if entry is not None:
            print(entry)

    def show_all_logs(self) -> None:
        for entry in self.entries:
            print(entry)

    def all_text(self) -> str:
        """Return every entry, each followed by a newline."""
        return "".join(f"{entry}\n" for entry in self.entries)


@dataclass
class Differential:
    """Final drive whose status depends on road speed."""

    ratio: float = 3.73
    status: str = STATUS_OK

    def update(self, speed: float) -> None:
        self.status = STATUS_OK if speed < 200.0 else STATUS_WARNING

    def show_status(self) -> str:
        """Print the status line with the drive ratio and return it."""
        line = f"Differential Status: {self.status} (Ratio: {self.ratio:g}:1)"
        print(line)
        return line