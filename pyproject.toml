[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "featherjson"
version = "0.0.1"
description = "A lightweight token-based JSON reader, editor and builder"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "lexer", "tokens", "builder", "pretty-print"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["featherjson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
