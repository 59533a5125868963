[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weights-measures"
version = "1.8.0"
description = "Unit conversion across angle, area, data rate, energy, information, length, mass, pixel density, power, pressure, speed, storage, temperature, time and volume"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "units",
    "conversion",
    "measurement",
    "metric",
    "imperial",
    "converter",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weights-measures = "weights_measures.cli:main"
wm-build-number = "weights_measures.buildinfo:main"

[tool.hatch.build.targets.wheel]
packages = ["weights_measures"]

[tool.hatch.build.targets.sdist]
include = ["weights_measures", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
