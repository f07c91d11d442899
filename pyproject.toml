[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecusim"
version = "0.1.0"
description = "A simple engine control unit simulator with sensors, actuators, engine status, logging and a text dashboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecu", "engine", "simulation", "automotive", "sensors", "actuators", "dashboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecusim = "ecusim.dashboard:main"

[tool.hatch.build.targets.wheel]
packages = ["ecusim"]

[tool.pytest.ini_options]
addopts = "-ra"
