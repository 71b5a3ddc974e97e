[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brown"
version = "0.1.0"
description = "A small terminal game engine built around an entity-component-system core and curses drawing."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "ecs", "entity component system", "curses", "terminal", "ascii"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brown"]

[tool.hatch.build.targets.sdist]
include = ["brown", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
