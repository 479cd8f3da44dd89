[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libraryhub"
version = "0.1.0"
description = "A small library management system: users, resources, loans, reservations and events stored as CSV files."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "loans", "reservations", "catalogue", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
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
libraryhub = "libraryhub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libraryhub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
