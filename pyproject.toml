[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markseg"
version = "0.1.0"
description = "Line-oriented segment parsers for CommonMark block constructs"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "parser", "segments"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["markseg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
