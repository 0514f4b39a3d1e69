[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sllothkit"
version = "0.1.0"
description = "Small 2D game toolkit: vector math, game objects, AABB collision test, input tracking, game states and layered rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "vector", "aabb", "collision", "game-state", "input"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sllothkit"]

[tool.pytest.ini_options]
addopts = "-ra"
