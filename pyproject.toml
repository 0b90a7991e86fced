[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pushswap"
version = "0.1.0"
description = "Sort integers with two stacks and a small set of operations, and check operation sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "stacks", "puzzle", "checker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "pushswap.cli:main"
push-swap-checker = "pushswap.checker:main"

[tool.setuptools.packages.find]
include = ["pushswap*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
