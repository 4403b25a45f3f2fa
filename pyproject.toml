[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitsim"
version = "1.0.0"
description = "Event-driven digital logic circuit simulator reading circuits from text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "circuit", "simulator", "gates", "digital"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
circuitsim = "circuitsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["circuitsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
