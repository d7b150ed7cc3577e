[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeweld"
version = "0.1.0"
description = "Chain commands between an input file (or here-document) and an output file, the way a shell pipeline does."
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "pipe", "shell", "here-doc", "redirection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipeweld = "pipeweld.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pipeweld"]

[tool.pytest.ini_options]
addopts = "-ra"
