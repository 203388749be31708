[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nepsolve"
version = "0.1.0"
description = "Solutions to short algorithmic exercises as plain Python functions, with a command that solves them from standard input"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "exercises",
    "segment-tree",
    "union-find",
    "olympiad",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nepsolve = "nepsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nepsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
