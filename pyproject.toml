[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peuler"
version = "0.1.0"
description = "Project Euler solutions with a small number-theory and linear-algebra toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "project-euler",
    "number-theory",
    "primes",
    "mathematics",
    "puzzles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["peuler"]

[tool.hatch.build.targets.sdist]
include = ["peuler", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
