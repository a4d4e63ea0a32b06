[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irsimtools"
version = "0.1.0"
description = "Generators for IRSIM command files and net-name input lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["irsim", "vlsi", "simulation", "eda", "switch-level", "cmd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irsim-inputgen = "irsimtools.inputgen:main"
irsim-decoder = "irsimtools.decoder:main"
irsim-cmdgen = "irsimtools.cmdgen:main"

[tool.hatch.build.targets.wheel]
packages = ["irsimtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
