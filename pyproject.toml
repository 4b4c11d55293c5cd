[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gracekit"
version = "0.1.0"
description = "Lenient JSON values with comments and trailing commas, plus a registry of named, declaratively built blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "parser", "comments", "trailing-comma", "declarative", "registry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gracekit"]

[tool.pytest.ini_options]
addopts = "-ra"
