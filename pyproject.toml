[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vlerrors"
version = "0.1.0"
description = "A small exception hierarchy carrying messages and argument details."
requires-python = ">=3.10"
dependencies = []
keywords = ["exceptions", "errors", "arguments"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vlerrors"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
