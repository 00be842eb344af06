[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qstools"
version = "0.1.0"
description = "Helpers for an object-storage command line client: path and flow parsing, size handling, aligned output, prompts, logging and message catalogues"
requires-python = ">=3.10"
dependencies = []
keywords = ["object-storage", "cli", "paths", "byte-size", "multipart", "i18n"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
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
qstools-extract = "qstools.extract:main"

[tool.hatch.build.targets.wheel]
packages = ["qstools"]

[tool.hatch.build.targets.sdist]
include = ["qstools", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
