[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crazythursday"
version = "1.0.0"
description = "Game rules for a zombie-survival week cycle: resources, weapons, zombie hordes and Thursday combat"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "zombie", "simulation", "survival"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crazythursday"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
