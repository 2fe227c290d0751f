[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtodo"
version = "0.1.0"
description = "A todo list for the terminal, kept in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "cli", "terminal", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tasks = "termtodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termtodo"]

[tool.pytest.ini_options]
addopts = "-ra"
