[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mipsfront"
version = "0.1.0"
description = "Front-end helpers for a MIPS simulator: command-line options, console input, session settings and dialog input parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["mips", "simulator", "emulator", "console", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mipsfront"]

[tool.hatch.build.targets.sdist]
include = ["mipsfront", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
