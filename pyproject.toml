[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "finderbot"
version = "0.1.0"
description = "Read and address EV3 sensor and tacho-motor device directories in a sysfs-style tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["ev3", "ev3dev", "robotics", "sysfs", "motor", "sensor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
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

[tool.hatch.build.targets.wheel]
packages = ["finderbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
