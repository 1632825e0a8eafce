[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeroute"
version = "0.1.0"
description = "Shortest routes, wall placement and drive commands for a robot on a 5x5 grid of crossings, with a serial command console"
requires-python = ">=3.10"
keywords = ["maze", "routing", "bfs", "robot", "serial", "zigbee"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazeroute-console = "mazeroute.console:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeroute"]

[tool.pytest.ini_options]
addopts = "-ra"
