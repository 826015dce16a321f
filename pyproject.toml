[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaxlab"
version = "0.1.0"
description = "Research, vaccine and employee records for a vaccine lab, with statistics, translations, RFID badge checks and HTML table export"
requires-python = ">=3.10"
keywords = ["vaccine", "laboratory", "research", "sqlite", "rfid", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Healthcare Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["vaxlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
