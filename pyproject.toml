[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Classic data structures and algorithms for coursework: sorting, linked lists, stacks, queues, priority queues and B-trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "sorting",
    "linked list",
    "circular list",
    "queue",
    "stack",
    "priority queue",
    "b-tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas-priority = "estruturas.priority:main"
estruturas-btree = "estruturas.btree:main"
estruturas-library = "estruturas.library:main"
estruturas-records = "estruturas.records:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
