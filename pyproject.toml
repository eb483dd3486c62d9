[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaincoll"
version = "0.1.0"
description = "A small collection of containers: arrays, rings, stacks, queues, linked lists, maps, string builders and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "data-structures", "linked-list", "ring-buffer", "hash-map", "binary-tree"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chaincoll"]

[tool.pytest.ini_options]
addopts = "-ra"
