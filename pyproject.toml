[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Small, readable implementations of classic data structures: BST, graph, hash table, linked lists, stacks and queues."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "binary-search-tree",
    "graph",
    "hash-table",
    "linked-list",
    "stack",
    "queue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsbasics-bst = "dsbasics.bst:main"
dsbasics-graph = "dsbasics.graph:main"
dsbasics-hashtable = "dsbasics.hashtable:main"
dsbasics-stacks-queues = "dsbasics.stacks_queues:main"
dsbasics-dll = "dsbasics.doubly_linked_list:main"
dsbasics-sll = "dsbasics.singly_linked_list:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["dsbasics"]
