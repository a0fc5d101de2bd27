[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireworld"
version = "0.1.0"
description = "Interactive Wireworld cellular automaton editor and simulator"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["wireworld", "cellular automaton", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wireworld = "wireworld.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireworld"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
