[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackkit"
version = "0.1.0"
description = "Small stack, linked-list and path-trie data structures in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "linked list", "persistent list", "trie", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stackkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
