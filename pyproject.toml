[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repofetch"
version = "0.1.0"
description = "Building blocks for a terminal summary of a Git repository: author and churn statistics, manifest reading, coloured ASCII art and inline images."
requires-python = ">=3.11"
keywords = ["git", "repository", "summary", "terminal", "ascii-art", "statistics", "sixel", "kitty"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Terminals",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["repofetch"]

[tool.hatch.build.targets.sdist]
include = ["repofetch", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
