[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inkrt"
version = "0.1.0"
description = "Building blocks for an ink story runtime: command set, binary header, restorable collections, bounded AVL map, PRNG and tag helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ink", "interactive-fiction", "narrative", "runtime", "avl", "restorable-stack"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inkrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
