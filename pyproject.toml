[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memadt"
version = "0.1.0"
description = "A simulated fixed-block memory manager with recycle lists, and container ADTs (dynamic array, doubly linked list, binary search tree) with test benches."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "memory-manager",
    "allocator",
    "recycle-list",
    "data-structures",
    "doubly-linked-list",
    "binary-search-tree",
    "dynamic-array",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memadt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
