"""Text dashboard that presents the ECU state panel by panel."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from ecusim.components import STATUS_OK, _evaluate_status
from ecusim.ecu import ECU

BOOST_SENSOR = 3
AFR_SENSOR = 1
FUEL_PRESSURE_SENSOR = 4

BOOST_RANGE = (0, 3000)  # 0-3 bar in mbar
AFR_RANGE = (1000, 2000)  # AFR 10.0-20.0, times 100
FUEL_PRESSURE_RANGE = (0, 5000)  # 0-5 bar in mbar

OK_COLOR = "#00ff00"
WARNING_COLOR = "#ff0000"

HEADER = "ECU Control Center"
WINDOW_TITLE = "Advanced ECU Simulation System"
BAR_WIDTH = 30


def _to_bar(value: float, scale: int, bounds: tuple[int, int]) -> int:
    """Scale a reading to an integer bar value, held inside the bar's range."""
    low, high = bounds
    return min(max(int(value * scale), low), high)


def _percent(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return (value - low) * 100 // (high - low)


def _panel_lines(text: str) -> list[str]:
    """Return the trimmed, non-empty lines of a report, leaving out headings."""
    return [
        line.strip()
        for line in text.split("\n")
        if line.strip() and "===" not in line
    ]


@dataclass(frozen=True)
class StatusIndicators:
    """Readings and bar positions shown on the dashboard panel."""

    boost: float
    afr: float
    fuel_pressure: float
    boost_bar: int
    afr_bar: int
    fuel_pressure_bar: int
    status: str
    color: str

    @property
    def status_text(self) -> str:
        return f"System Status: {self.status}"


class Dashboard:
    """Presents an ECU as a set of text panels and drives its simulation."""

    def __init__(self, ecu: Optional[ECU] = None) -> None:
        self.ecu = ecu if ecu is not None else ECU()

    def simulate_step(self) -> None:
        """Run one simulation step on the ECU."""
        self.ecu.simulate_step()

    def status_indicators(self) -> StatusIndicators:
        """Compute the bar values and overall status from the current readings."""
        boost = self.ecu.sensor_value(BOOST_SENSOR)
        afr = self.ecu.sensor_value(AFR_SENSOR)
        fuel_pressure = self.ecu.sensor_value(FUEL_PRESSURE_SENSOR)
        status = _evaluate_status(boost, afr)
        return StatusIndicators(
            boost=boost,
            afr=afr,
            fuel_pressure=fuel_pressure,
            boost_bar=_to_bar(boost, 1000, BOOST_RANGE),
            afr_bar=_to_bar(afr, 100, AFR_RANGE),
            fuel_pressure_bar=_to_bar(fuel_pressure, 1000, FUEL_PRESSURE_RANGE),
            status=status,
            color=OK_COLOR if status == STATUS_OK else WARNING_COLOR,
        )

    def sensor_lines(self) -> list[str]:
        return _panel_lines(self.ecu.sensors_info())

    def actuator_lines(self) -> list[str]:
        return _panel_lines(self.ecu.actuators_info())

    def engine_lines(self) -> list[str]:
        return _panel_lines(self.ecu.engine_status_info())

    def log_lines(self) -> list[str]:
        return _panel_lines(self.ecu.logs_info())

    def project_info(self) -> str:
        return (
            "Advanced ECU Simulation System with Dynamic Engine Management\n"
            "Description: Simulates a full-featured automotive ECU, including "
            "sensors, actuators, engine logic, safety features, and real-time "
            "logging."
        )

    def render(self) -> str:
        """Return the whole dashboard as text."""
        indicators = self.status_indicators()
        cards = [
            ("Boost Pressure", "bar", indicators.boost_bar, BOOST_RANGE),
            ("Air/Fuel Ratio", "ratio", indicators.afr_bar, AFR_RANGE),
            ("Fuel Pressure", "bar", indicators.fuel_pressure_bar, FUEL_PRESSURE_RANGE),
        ]
        out = [WINDOW_TITLE, HEADER, "", "[Dashboard]"]
        for title, unit, value, bounds in cards:
            percent = _percent(value, bounds)
            filled = percent * BAR_WIDTH // 100
            bar = "#" * filled + "-" * (BAR_WIDTH - filled)
            out.append(f"  {title:<16} [{bar}] {percent:3d}% ({unit})")
        out.append(f"  {indicators.status_text}")
        panels = [
            ("Sensors", self.sensor_lines()),
            ("Actuators", self.actuator_lines()),
            ("Engine Status", self.engine_lines()),
            ("System Logs", self.log_lines()),
        ]
        for title, lines in panels:
            out.append("")
            out.append(f"[{title}]")
            out.extend(f"  {line}" for line in lines)
        out.append("")
        out.append(self.project_info())
        return "\n".join(out) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecusim", description="Run the ECU simulation dashboard."
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="run this many simulation steps and exit instead of prompting",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.0,
        help="seconds to wait between steps when --steps is given",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the dashboard; interactive unless a number of steps is given."""
    args = _build_parser().parse_args(argv)
    if args.steps is not None and args.steps < 0:
        print("ecusim: --steps must not be negative", file=sys.stderr)
        return 2
    if args.interval < 0:
        print("ecusim: --interval must not be negative", file=sys.stderr)
        return 2

    dashboard = Dashboard(ECU(random.Random(args.seed)))

    if args.steps is not None:
        for step in range(args.steps):
            if step and args.interval:
                time.sleep(args.interval)
            dashboard.simulate_step()
        print(dashboard.render(), end="")
        return 0

    print(dashboard.render(), end="")
    prompt = "Press Enter to run the simulation, 'q' to quit: "
    print(prompt, end="", flush=True)
    for line in sys.stdin:
        command = line.strip().lower()
        if command in ("q", "quit", "exit"):
            break
        if command in ("", "s", "sim", "run"):
            dashboard.simulate_step()
            print(dashboard.render(), end="")
        else:
            print(f"Unknown command: {command}")
        print(prompt, end="", flush=True)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())