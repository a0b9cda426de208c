[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gengine"
version = "0.1.0"
description = "A small 2D entity-component game engine on pygame: hierarchical transforms, cameras, resources and Tiled map rendering"
requires-python = ">=3.10"
keywords = ["game engine", "entity component", "2d", "tiled", "tmx", "pygame"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gengine-test-game = "gengine.test_game:main"

[tool.hatch.build.targets.wheel]
packages = ["gengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
