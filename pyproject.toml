[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxkit"
version = "0.1.0"
description = "Time keeping, clock telegrams, hashing, LED and configuration helpers for a people-counting sensor node"
requires-python = ">=3.10"
dependencies = []
keywords = ["dcf77", "if482", "timelib", "hash", "led-matrix", "ble", "sensor-node"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["paxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
