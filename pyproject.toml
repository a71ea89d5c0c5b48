[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsn"
version = "0.1.0"
description = "Body sensor network building blocks: vital-sign ranges, Markov data generation, data fusion, and logging, fault-injection and knowledge-repository components."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "body sensor network",
    "vital signs",
    "markov chain",
    "data fusion",
    "fault injection",
    "self-adaptive systems",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bsn"]

[tool.hatch.build.targets.sdist]
include = ["bsn", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
