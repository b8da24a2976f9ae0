[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockpool"
version = "1.0.0"
description = "Fixed-size block memory pools over byte arenas, with a size-class manager, block headers, free lists and fragmentation stats"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory pool", "allocator", "free list", "bitmap", "fragmentation"]
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
packages = ["blockpool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
