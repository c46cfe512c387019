[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtds"
version = "0.1.0"
description = "Grow a seed set of vertices into a locally optimal triangle-dense subgraph"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "triangle",
    "triangle-density",
    "dense-subgraph",
    "local-search",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtds = "mtds.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mtds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
