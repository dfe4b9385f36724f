[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankomat"
version = "1.0.0"
description = "A model cash machine on the console: log in with a login and PIN, check the balance, withdraw and deposit cash against an SQLite user database."
requires-python = ">=3.10"
dependencies = []
keywords = ["atm", "cash machine", "bank", "sqlite", "teller", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankomat = "bankomat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankomat"]

[tool.hatch.build.targets.sdist]
include = ["bankomat", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
