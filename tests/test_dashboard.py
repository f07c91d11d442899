import io
import random

import pytest

from ecusim.dashboard import (
    AFR_RANGE,
    BOOST_RANGE,
    FUEL_PRESSURE_RANGE,
    Dashboard,
    StatusIndicators,
    main,
)
from ecusim.ecu import ECU


@pytest.fixture
def dashboard():
    return Dashboard(ECU(random.Random(1234)))


def test_initial_indicators(dashboard):
    ind = dashboard.status_indicators()
    assert isinstance(ind, StatusIndicators)
    assert ind.boost_bar == 1000
    assert ind.fuel_pressure_bar == 3000
    assert AFR_RANGE[0] <= ind.afr_bar <= AFR_RANGE[1]
    assert ind.status == "OK"
    assert ind.color == "#00ff00"
    assert ind.status_text == "System Status: OK"


def test_warning_on_high_boost(dashboard):
    dashboard.ecu.sensors[3].value = 2.5
    ind = dashboard.status_indicators()
    assert ind.status == "WARNING"
    assert ind.color == "#ff0000"
    assert ind.boost_bar == 2500


def test_warning_on_lean_afr(dashboard):
    dashboard.ecu.sensors[1].value = 17.0
    assert dashboard.status_indicators().status == "WARNING"


def test_bars_held_in_range(dashboard):
    dashboard.ecu.sensors[3].value = 9.0
    dashboard.ecu.sensors[1].value = 2.0
    dashboard.ecu.sensors[4].value = -1.0
    ind = dashboard.status_indicators()
    assert ind.boost_bar == BOOST_RANGE[1]
    assert ind.afr_bar == AFR_RANGE[0]
    assert ind.fuel_pressure_bar == FUEL_PRESSURE_RANGE[0]


def test_sensor_lines_initial(dashboard):
    lines = dashboard.sensor_lines()
    assert len(lines) == 5
    assert lines[0] == "Road Speed: 0.000000 km/h"
    assert lines[1] == "AFR: 14.700000 ratio"
    assert all("===" not in line for line in lines)


def test_actuator_lines_initial(dashboard):
    assert dashboard.actuator_lines() == [
        "NO2 Solenoid: OFF",
        "Fuel Injectors: OFF",
        "Boost Controller: OFF",
    ]


def test_engine_lines(dashboard):
    assert dashboard.engine_lines() == ["Status: OK"]
    dashboard.ecu.sensors[3].value = 3.0
    assert dashboard.engine_lines() == ["Status: WARNING"]


def test_log_lines_grow_with_steps(dashboard):
    assert dashboard.log_lines() == []
    dashboard.simulate_step()
    first = dashboard.log_lines()
    assert len(first) == 3
    assert first[0].endswith("Simulation step completed:")
    assert first[1].startswith("Boost: ")
    assert first[2].startswith("AFR: ")
    dashboard.simulate_step()
    assert len(dashboard.log_lines()) == 6


def test_simulate_step_matches_ecu_state(dashboard):
    dashboard.simulate_step()
    ind = dashboard.status_indicators()
    assert ind.boost == dashboard.ecu.sensor_value(3)
    assert ind.afr == dashboard.ecu.sensor_value(1)
    assert ind.fuel_pressure == dashboard.ecu.sensor_value(4)


def test_render_contains_panels(dashboard):
    dashboard.simulate_step()
    text = dashboard.render()
    assert "ECU Control Center" in text
    for title in ("[Dashboard]", "[Sensors]", "[Actuators]", "[Engine Status]", "[System Logs]"):
        assert title in text
    assert "Simulation step completed:" in text
    assert dashboard.project_info() in text


def test_project_info(dashboard):
    info = dashboard.project_info()
    assert info.startswith("Advanced ECU Simulation System with Dynamic Engine Management")


def test_default_dashboard_builds_ecu():
    board = Dashboard()
    assert board.ecu.sensor_value(4) == 3.0


def test_main_with_steps(capsys):
    assert main(["--steps", "2", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "ECU Control Center" in out
    assert out.count("Simulation step completed:") == 2


def test_main_same_seed_same_readings(capsys):
    main(["--steps", "3", "--seed", "5"])
    first = capsys.readouterr().out
    main(["--steps", "3", "--seed", "5"])
    second = capsys.readouterr().out
    strip = lambda text: [line for line in text.splitlines() if " - " not in line]
    assert strip(first) == strip(second)


def test_main_negative_steps(capsys):
    assert main(["--steps", "-1"]) == 2
    assert "--steps" in capsys.readouterr().err


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\nrun\nq\n\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Simulation step completed:") == 3


def test_main_interactive_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bogus\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Unknown command: bogus" in out
    assert "Simulation step completed:" not in out