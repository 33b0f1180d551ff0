[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromic"
version = "0.1.0"
description = "Entity-component world, systems and commands for a tile-based 2D platformer"
requires-python = ">=3.10"
keywords = ["game", "platformer", "ecs", "pygame", "tiles"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chromic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
