[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridrogue"
version = "0.1.0"
description = "Entity-component core for a grid-based roguelike: components, world, queries, inventory, character progression, field of view, pathfinding state and tile settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "ecs", "entity-component-system", "game", "grid", "fov", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridrogue"]

[tool.hatch.build.targets.sdist]
include = ["gridrogue", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
