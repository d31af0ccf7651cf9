[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevenseg"
version = "0.1.0"
description = "Multiplexed 7-segment display driver with numbers, hex, temperatures and scrolling text"
requires-python = ">=3.10"
dependencies = []
keywords = ["7-segment", "seven-segment", "display", "led", "multiplexing", "microcontroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sevenseg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
