[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swbattle"
version = "0.1.0"
description = "Tick-based battle simulation of swordsmen and hunters on a grid, driven by a command file"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "game", "turn-based", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swbattle = "swbattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swbattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
