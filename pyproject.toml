[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satlink"
version = "0.1.0"
description = "Build a satellite link tree from frequencies and encode, decode and query it"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "binary-tree", "heap", "encoding", "satellites"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
satlink = "satlink.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["satlink"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
