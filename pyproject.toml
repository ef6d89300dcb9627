[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zappyview"
version = "1.0.0"
description = "Spectator-side game model for Zappy: tiles, players, animations, camera, login form and a line-based server connection"
requires-python = ">=3.10"
dependencies = []
keywords = ["zappy", "game", "viewer", "spectator", "simulation"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zappyview"]

[tool.hatch.build.targets.sdist]
include = ["zappyview", "tests"]

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
