[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savedefender"
version = "0.1.0"
description = "Rules and state of a tower defense game: waves, towers, targeting, upgrades, input and screen layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "strategy", "waves"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
savedefender = "savedefender.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["savedefender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
