[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperpaths"
version = "0.1.0"
description = "Spiess-Florian optimal strategy search and transit demand assignment on hyperpaths"
requires-python = ">=3.10"
keywords = ["transit", "assignment", "hyperpath", "spiess-florian", "optimal strategy", "public transport"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hyperpaths-paper = "hyperpaths.paper:main"

[tool.hatch.build.targets.wheel]
packages = ["hyperpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
