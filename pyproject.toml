[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contractdesk"
version = "0.1.0"
description = "A small console application for registering users and managing their contracts"
requires-python = ">=3.10"
dependencies = []
keywords = ["contracts", "users", "console", "business"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contractdesk = "contractdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contractdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
