[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jitkit"
version = "0.1.0"
description = "Generic collections, sequence helpers and synchronisation primitives"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "collections",
    "list",
    "linked-list",
    "skiplist",
    "treemap",
    "hashmap",
    "multimap",
    "set",
    "condition-variable",
    "object-pool",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jitkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
