[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsengine"
version = "0.1.0"
description = "A small entity-component-system game engine built on pygame"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["ecs", "entity-component-system", "game-engine", "pygame", "sprites"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecsengine = "ecsengine.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["ecsengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
