[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leech"
version = "0.1.0"
description = "Table change tracking building blocks: a lenient JSON parser and composer, patch documents, a severity-filtered logger and a CSV table backend"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "patch", "csv", "table", "diff", "synchronization"]
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
    "Topic :: Database",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leech"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
