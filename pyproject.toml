[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "finapp"
version = "0.1.0"
description = "Personal expense tracker with a JWT-protected JSON HTTP API backed by SQLite"
requires-python = ">=3.10"
keywords = ["expenses", "finance", "budget", "accounting", "sqlite", "jwt", "rest"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = [
    "flask",
    "pyjwt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
finapp = "finapp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["finapp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
