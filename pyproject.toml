[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overworld"
version = "0.1.0"
description = "Entity-component core for a tile-based overworld role-playing game: components, entities, input routing, trainers and save files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "entity-component-system", "tilemap", "rpg"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["overworld"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
