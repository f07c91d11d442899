"""Engine control unit simulator with sensors, actuators, engine status, logging and a text dashboard."""

__version__ = "0.1.0"
__all__ = ["components", "ecu", "dashboard"]